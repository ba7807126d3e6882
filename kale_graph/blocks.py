"""Extraction of fenced kale code blocks from Markdown notes."""

import re
from dataclasses import dataclass
from typing import List

DEFAULT_KEYWORD = 'kale'

_fence_open_re = re.compile(r'^(?P<indent> {0,3})(?P<fence>`{3,}|~{3,})\s*(?P<info>[^`]*?)\s*$')


@dataclass
class CodeBlock:
    source: str
    line: int  # 1-based line of the opening fence


def extract_blocks(markdown: str, keyword: str = DEFAULT_KEYWORD) -> List[CodeBlock]:
    """Return the fenced code blocks whose info string starts with the word ``keyword``.

    An unterminated block runs to the end of the document.
    """
    blocks: List[CodeBlock] = []
    lines = markdown.splitlines()
    i = 0
    while i < len(lines):
        m = _fence_open_re.match(lines[i])
        if not m:
            i += 1
            continue
        fence = m.group('fence')
        close_re = re.compile(r'^ {0,3}' + re.escape(fence[0]) + '{' + str(len(fence)) + r',}\s*$')
        start = i
        body: List[str] = []
        i += 1
        while i < len(lines) and not close_re.match(lines[i]):
            body.append(lines[i])
            i += 1
        i += 1
        info = m.group('info').split()
        if info and info[0] == keyword:
            blocks.append(CodeBlock('\n'.join(body), start + 1))
    return blocks
