"""CLI for parsing a log entry against the contacts of a local store and printing the result as JSON"""

import argparse

from socialq.config import settings
from socialq.parsing.log_parser import parse_log_entry
from socialq.stores.local import LocalStore


def main(text: str, store_path: str) -> None:
    store = LocalStore(store_path)
    parsed = parse_log_entry(text, store.list_people())
    print(parsed.model_dump_json(indent=2))


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("text", type=str, help="Log entry, e.g. \"Had coffee with Sarah Monday\"")
    parser.add_argument(
        "--store",
        type=str,
        required=False,
        help="Local store file",
        default=str(settings.local_store_path),
    )

    args = parser.parse_args()

    main(text=args.text, store_path=args.store)
