# services/tree.py
"""
Two-level view of the service taxonomy.

The table stores categories as a flat self-referencing list; listings and
filters work with this structure instead, so a third level simply cannot be
represented.
"""
import logging
from typing import NamedTuple, Tuple

logger = logging.getLogger('directory')


class Subcategory(NamedTuple):
    id: int
    name: str
    order: int = 0


class MainCategory(NamedTuple):
    id: int
    name: str
    order: int = 0
    subcategories: Tuple[Subcategory, ...] = ()

    @property
    def ids(self):
        """Own id plus the ids of all subcategories"""
        return {self.id} | {sub.id for sub in self.subcategories}


def _sort_key(item):
    return (item.order, item.name)


def build_category_tree(categories):
    """
    Build main categories with their subcategories from flat rows.

    `categories` is any iterable of objects with id, name, parent_id and
    order. Rows whose parent is missing or is itself a subcategory are
    dropped and logged.
    """
    rows = list(categories)
    mains = {row.id: row for row in rows if row.parent_id is None}
    children = {main_id: [] for main_id in mains}

    for row in rows:
        if row.parent_id is None:
            continue
        if row.parent_id not in mains:
            logger.warning(
                "Dropping category %s (%s): parent %s is not a main category",
                row.id, row.name, row.parent_id
            )
            continue
        children[row.parent_id].append(
            Subcategory(id=row.id, name=row.name, order=getattr(row, 'order', 0))
        )

    tree = [
        MainCategory(
            id=main.id,
            name=main.name,
            order=getattr(main, 'order', 0),
            subcategories=tuple(sorted(children[main.id], key=_sort_key)),
        )
        for main in mains.values()
    ]
    return sorted(tree, key=_sort_key)


def tree_as_dicts(tree):
    return [
        {
            'id': main.id,
            'name': main.name,
            'subcategories': [{'id': sub.id, 'name': sub.name} for sub in main.subcategories],
        }
        for main in tree
    ]
