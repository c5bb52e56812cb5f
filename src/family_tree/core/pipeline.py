from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from family_tree.core.context import QueryContext
from family_tree.core.exceptions import PipelineError
from family_tree.loader import load_tree, resolve_input_path
from family_tree.query import most_recent_common_ancestor
from family_tree.tree import FamilyTree, TreeNode


@dataclass
class QueryResult:
    """What one run produced: the tree and the answer to its query."""

    tree: FamilyTree
    name1: str
    name2: str
    ancestor: Optional[TreeNode]

    @property
    def ancestor_name(self) -> Optional[str]:
        return self.ancestor.name if self.ancestor is not None else None

    def describe(self) -> str:
        if self.ancestor is None:
            return f"{self.name1} and {self.name2} have no common ancestor"
        return (
            f"Most recent common ancestor of {self.name1} and {self.name2} "
            f"is {self.ancestor.name}"
        )


class Pipeline:
    """
    Orchestrates one run: load the tree file, build the tree, answer the query.
    No business logic lives here.
    """

    def __init__(self, context: QueryContext):
        self.ctx = context
        self.log = context.logger

    def run(self) -> QueryResult:
        self.log.info("Pipeline starting")

        if not self.ctx.input_path:
            raise PipelineError("No input file given")
        if self.ctx.names:
            name1, name2 = self.ctx.names
        else:
            try:
                name1, name2 = self.ctx.config.default_names
            except ValueError as exc:
                self.log.error(f"Bad query configuration: {exc}")
                raise PipelineError(str(exc)) from exc

        try:
            path = resolve_input_path(self.ctx.input_path)
            tree = load_tree(path, encoding=self.ctx.config.loader.get("encoding"))
            self.ctx.stats["nodes"] = tree.node_count()

            ancestor = most_recent_common_ancestor(tree, name1, name2)
        except Exception as exc:
            self.log.error(
                f"Pipeline execution failed: {exc}", exc_info=self.ctx.debug
            )
            raise

        self.log.info("Pipeline completed successfully")
        return QueryResult(tree=tree, name1=name1, name2=name2, ancestor=ancestor)
