from __future__ import annotations

from bisect import bisect_left
from typing import Sequence

from jsdoc_cli.analysis.jsdoc import parse_doc_block
from jsdoc_cli.analysis.model import Documentation
from jsdoc_cli.ingest.adapter_contract import CommentBlock


class DocumentationMatcher:
    """Position-indexed lookup of the comment block closest above a declaration."""

    def __init__(self, comments: Sequence[CommentBlock]) -> None:
        self._comments = sorted(comments, key=lambda comment: comment.end)
        self._ends = [comment.end for comment in self._comments]

    def comment_before(self, position: int) -> CommentBlock | None:
        index = bisect_left(self._ends, position) - 1
        if index < 0:
            return None
        return self._comments[index]

    def documentation_before(self, position: int) -> Documentation | None:
        comment = self.comment_before(position)
        if comment is None or not comment.is_doc_block:
            return None
        return parse_doc_block(comment.text)
