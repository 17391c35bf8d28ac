"""HTTP adapter exposing PhotoRepository operations"""
