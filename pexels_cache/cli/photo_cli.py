#!/usr/bin/env python3
# pexels_cache/cli/photo_cli.py - Command-line interface for the photo cache
import argparse
import sys
import time

from ..bootstrap import build_repository
from ..core.exceptions import PexelsCacheException
from ..domain.value_objects import normalize_query
from ..services import PhotoRepository


def search(repository: PhotoRepository, query: str, page: int, per_page: int | None, refresh: bool) -> int:
    """Search photos, cache first"""
    print(f"🔍 Searching '{query}' (page {page})...")

    result = repository.search_photos(query, page, per_page, force_refresh=refresh)
    if result.is_success:
        found = result.value
        source = "cache" if found.from_cache else "network"
        print(f"\n📷 {found.count()} photos from {source}:")
        for photo in found.photos:
            star = "★" if repository.is_favorite(photo.id) else " "
            print(f"   {star} {photo.id}  {photo.width}x{photo.height}  {photo.photographer}")
        if found.has_next_page:
            print(f"\n➡️  More results: page {page + 1}")
        return 0

    print(f"❌ {type(result.error).__name__}: {result.error.message}")
    return 1


def show(repository: PhotoRepository, photo_id: int) -> int:
    """Show photo details"""
    result = repository.get_photo_by_id(photo_id)
    if result.is_failure:
        print(f"❌ {type(result.error).__name__}: {result.error.message}")
        return 1

    photo = result.value
    print(f"📋 Photo {photo.id}:")
    print(f"   Photographer: {photo.photographer}")
    print(f"   Size: {photo.width}x{photo.height}")
    print(f"   Page: {photo.url}")
    print(f"   Original: {photo.src.original}")
    print(f"   Large: {photo.src.large}")
    print(f"   Favorite: {'yes' if repository.is_favorite(photo.id) else 'no'}")
    return 0


def toggle_favorite(repository: PhotoRepository, photo_id: int) -> int:
    is_favorite = repository.toggle_favorite(photo_id)
    print(f"{'★ Added to' if is_favorite else '☆ Removed from'} favorites: {photo_id}")
    return 0


def list_favorites(repository: PhotoRepository) -> int:
    photos = repository.list_favorites().snapshot()
    if not photos:
        print("✅ No favorites yet")
        return 0

    print(f"\n★ Favorites ({len(photos)}):")
    for photo in photos:
        print(f"   {photo.id}  {photo.photographer}  {photo.url}")
    return 0


def recent(repository: PhotoRepository, limit: int, clear: bool) -> int:
    if clear:
        repository.clear_recent_queries()
        print("🧹 Recent searches cleared")
        return 0

    queries = repository.recent_queries(limit).snapshot()
    if not queries:
        print("✅ No recent searches")
        return 0

    print("\n🕒 Recent searches:")
    for query in queries:
        print(f"   {query}")
    return 0


def clear_cache(repository: PhotoRepository) -> int:
    print("🧹 Clearing cache (favorites kept)...")
    deleted = repository.clear_cache()
    print(f"✅ Removed {deleted} cached photos")
    return 0


def refresh(repository: PhotoRepository, query: str, include_favorites: bool) -> int:
    deleted = repository.refresh_cache(query, include_favorites=include_favorites)
    print(f"✅ Invalidated '{normalize_query(query)}': {deleted} photos removed")
    return 0


def stats(repository: PhotoRepository) -> int:
    data = repository.get_stats()
    print("\n📊 Cache Statistics:")
    print(f"   Cached Photos: {data['total_records']}")
    print(f"   Favorites: {data['favorite_records']}")
    print(f"   Recent Searches: {data['recent_queries']}")
    print(f"   Last Search: {data['last_query'] or '-'}")
    print(f"   Last Search Photos: {data['last_query_records']}")
    print(f"   Max Age: {data['cache_max_age_ms'] / 3_600_000:.1f} h")
    print(f"   Generated: {time.ctime()}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pexels photo cache CLI")
    parser.add_argument("--db", help="SQLite database path (defaults to config.yml)")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    search_parser = subparsers.add_parser("search", help="Search photos")
    search_parser.add_argument("query", help="Search text")
    search_parser.add_argument("--page", type=int, default=1, help="1-based page number")
    search_parser.add_argument("--per-page", type=int, default=None, help="Page size")
    search_parser.add_argument("--refresh", action="store_true", help="Bypass the cache")

    show_parser = subparsers.add_parser("show", help="Show photo details")
    show_parser.add_argument("photo_id", type=int, help="Photo ID")

    favorite_parser = subparsers.add_parser("favorite", help="Toggle a favorite")
    favorite_parser.add_argument("photo_id", type=int, help="Photo ID")

    subparsers.add_parser("favorites", help="List favorites")

    recent_parser = subparsers.add_parser("recent", help="List recent searches")
    recent_parser.add_argument("--limit", type=int, default=10, help="Number of entries")
    recent_parser.add_argument("--clear", action="store_true", help="Clear recent searches")

    subparsers.add_parser("clear-cache", help="Clear cache (favorites kept)")

    refresh_parser = subparsers.add_parser("refresh", help="Invalidate one query")
    refresh_parser.add_argument("query", help="Query to invalidate")
    refresh_parser.add_argument(
        "--include-favorites", action="store_true", help="Also drop favorite photos"
    )

    subparsers.add_parser("stats", help="Cache statistics")

    return parser


def run(args: argparse.Namespace, repository: PhotoRepository) -> int:
    if args.command == "search":
        return search(repository, args.query, args.page, args.per_page, args.refresh)
    elif args.command == "show":
        return show(repository, args.photo_id)
    elif args.command == "favorite":
        return toggle_favorite(repository, args.photo_id)
    elif args.command == "favorites":
        return list_favorites(repository)
    elif args.command == "recent":
        return recent(repository, args.limit, args.clear)
    elif args.command == "clear-cache":
        return clear_cache(repository)
    elif args.command == "refresh":
        return refresh(repository, args.query, args.include_favorites)
    elif args.command == "stats":
        return stats(repository)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        repository, database = build_repository(database_path=args.db)
    except PexelsCacheException as e:
        print(f"❌ {e.message}")
        return 1

    try:
        return run(args, repository)
    except PexelsCacheException as e:
        print(f"❌ {type(e).__name__}: {e.message}")
        return 1
    finally:
        database.close()


if __name__ == "__main__":
    sys.exit(main())
