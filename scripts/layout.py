"""CLI for laying out the relationship graph of a local store and printing it as JSON"""

import argparse

from socialq.config import settings
from socialq.graph.transform import apply_highlight, build_graph_data
from socialq.stores.local import LocalStore


def main(store_path: str, selected_person_id: str | None) -> None:
    store = LocalStore(store_path)
    graph = build_graph_data(store.list_people(), store.list_interactions())
    graph = apply_highlight(graph.nodes, graph.edges, selected_person_id)
    print(graph.model_dump_json(indent=2))


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--store",
        type=str,
        required=False,
        help="Local store file",
        default=str(settings.local_store_path),
    )
    parser.add_argument(
        "--selected", type=str, required=False, help="ID of the person to highlight"
    )

    args = parser.parse_args()

    main(store_path=args.store, selected_person_id=args.selected)
