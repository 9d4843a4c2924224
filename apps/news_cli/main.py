import argparse
import json
import logging
import sys

from newsbrief_core import NewsClient, ProviderError, fallback_news, get_news
from newsbrief_core.config import LOG_LEVEL, MODES


def print_items(items):
    for i, item in enumerate(items, 1):
        print(f"[{i}] {item['title']}")
        print(f"    {item['source']} · {item['date']}")
        print(f"    {item['summary']}\n")


def main(argv=None):
    p = argparse.ArgumentParser(description="Recent news summaries for a topic")
    p.add_argument("topic", help="What to fetch news about")
    p.add_argument("--page", type=int, default=1, help="Page of results (5 per page)")
    p.add_argument("--mode", choices=MODES, help="Request shape; defaults to NEWS_MODE")
    p.add_argument("--json", action="store_true", help="Print the raw JSON array")
    args = p.parse_args(argv)

    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    client = NewsClient.from_env(args.mode)
    if not args.json:
        print(f"[+] Fetching news: {args.topic!r} (page {args.page}, {client.mode})")

    code = 0
    try:
        items, used_fallback = get_news(client, args.topic, max(args.page, 1))
    except ProviderError as e:
        print(f"[error] {e}", file=sys.stderr)
        items, used_fallback, code = fallback_news(), True, 1

    if args.json:
        print(json.dumps(items, indent=2, ensure_ascii=False))
    else:
        if used_fallback:
            print("[warn] Provider output unusable; showing placeholder items.\n")
        print_items(items)
    return code


if __name__ == "__main__":
    sys.exit(main())
