"""Inspect checklist content to aid authoring."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path

from checklist_nav.content import iter_anchor_ids, load_content
from checklist_nav.schemas import ContentTree
from checklist_nav.sections import count_steps, filter_sections


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect checklist sections, steps, and block types.")
    parser.add_argument("--file", help="Content JSON path (defaults to the bundled checklist)")
    parser.add_argument("--query", default="", help="Show which sections and steps a query keeps")
    args = parser.parse_args()

    tree = load_content(Path(args.file) if args.file else None)
    blocks = collect_stats(tree)

    print(f"Sections: {len(tree)}")
    print(f"Steps: {count_steps(tree)}")
    print(f"Anchors: {len(list(iter_anchor_ids(tree)))}")

    print("\nBlocks:")
    for name, count in blocks.most_common():
        print(f"{name}: {count}")

    if args.query:
        print(f"\nMatches for {args.query!r}:")
        for section in filter_sections(tree, args.query):
            print(f"{section.id}: {section.title}")
            for step in section.steps:
                print(f"    {step.id}: {step.title}")


def collect_stats(tree: ContentTree) -> Counter:
    blocks = Counter()
    for section in tree:
        for step in section.steps:
            for block in step.blocks:
                blocks[block.type] += 1
    return blocks


if __name__ == "__main__":
    main()
