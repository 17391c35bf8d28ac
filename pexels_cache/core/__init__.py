"""Core utilities - configuration, logging, exceptions, change notification"""
