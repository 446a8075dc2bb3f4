"""Summaries and console rendering for a Grouping."""
from __future__ import annotations

from filesort.classify import CATEGORY_MEMBERS, Category, aliases_for
from filesort.group import Grouping

ORDERS = ("category", "count", "name")

_DECLARED = {category: idx for idx, category in enumerate(Category)}


def _non_empty(grouping: Grouping) -> list[tuple[Category, list]]:
    return [(cat, entries) for cat, entries in grouping.items() if entries]


def summarize(grouping: Grouping) -> tuple[int, int]:
    """Return (total_files, non_empty_category_count)."""
    blocks = _non_empty(grouping)
    return sum(len(entries) for _, entries in blocks), len(blocks)


def _ordered(blocks: list[tuple[Category, list]], order: str) -> list[tuple[Category, list]]:
    if order == "count":
        return sorted(blocks, key=lambda b: (-len(b[1]), _DECLARED[b[0]]))
    if order == "name":
        return sorted(blocks, key=lambda b: b[0].value.lower())
    if order == "category":
        return sorted(blocks, key=lambda b: _DECLARED[b[0]])
    raise ValueError(f"unknown order {order!r}; expected one of {', '.join(ORDERS)}")


def render(grouping: Grouping, *, icon: str = "\U0001f4c1", order: str = "category") -> list[str]:
    """
    Render non-empty categories as blocks:

        📁 Text Files (2 files)
          - a.txt
          - b.TXT
        <blank>
    """
    prefix = f"{icon} " if icon else ""
    lines: list[str] = []
    for category, entries in _ordered(_non_empty(grouping), order):
        lines.append(f"{prefix}{category.value} ({len(entries)} files)")
        for entry in entries:
            lines.append(f"  - {entry.display_name}")
        lines.append("")
    return lines


def render_table() -> list[str]:
    """One line per category listing the extensions it recognizes."""
    width = max(len(category.value) for category in Category)
    lines = []
    for category, members in CATEGORY_MEMBERS.items():
        if category is Category.OTHERS:
            exts = "(unrecognized or no extension)"
        else:
            names = []
            for ext_id in sorted(members, key=lambda m: m.value):
                names.append(ext_id.value)
                names.extend(aliases_for(ext_id))
            exts = " ".join(names)
        lines.append(f"{category.value:<{width}}  {exts}")
    return lines
