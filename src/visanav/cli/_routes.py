"""``visanav routes``: list the page table.

Prints every route with its path, page, named shortcut and the props the
page receives.
"""

import argparse

from visanav.pages import PageTable


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of PATH, PAGE, NAME and PROPS."""
    table = PageTable()

    rows: list[tuple[str, str, str, str]] = [
        (route.path, route.page, route.name or "-", ", ".join(sorted(route.props)) or "-")
        for route in table.routes
    ]

    # Column widths
    max_path = max(max(len(r[0]) for r in rows), 4)  # "PATH" header
    max_page = max(max(len(r[1]) for r in rows), 4)  # "PAGE" header
    max_name = max(max(len(r[2]) for r in rows), 4)  # "NAME" header

    fmt = f"{{:<{max_path}}}  {{:<{max_page}}}  {{:<{max_name}}}  {{}}"
    print(fmt.format("PATH", "PAGE", "NAME", "PROPS"))
    print("-" * min(max_path + max_page + max_name + 6 + 5, 80))
    for path, page, name, props in rows:
        print(fmt.format(path, page, name, props))
