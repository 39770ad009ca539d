# -*- coding: utf-8 -*-
"""
Построчный парсер Wavefront OBJ.

Каждая непустая строка (не комментарий) превращается в одну директиву из
`objmesh.directives`.  Первая же ошибка прерывает разбор целиком –
`ParseError` содержит номер строки, её текст, колонку и список ожидаемого.

Поддерживаются: v, vt, vn, f, o, g, s, usemtl, mtllib.
Грани – только 3 или 4 угла и обязательно с нормалями (p//n, p/t/n).
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from objmesh.directives import (
    Corner,
    Directive,
    Face,
    GroupName,
    MaterialLib,
    ObjectName,
    SmoothingGroup,
    UseMaterial,
    Vertex,
    VertexNormal,
    VertexTexture,
)
from objmesh.errors import ParseError, UnsupportedFaceError
from objmesh.math.vec3 import Vec3
from objmesh.utils.logger import logger

_TOKEN_RE = re.compile(r"\S+")
_DIGITS_RE = re.compile(r"[0-9]+")
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
# комментарий – `#` в начале строки или после пробела; `mat#2` – это имя
_COMMENT_RE = re.compile(r"(?:^|(?<=\s))#")

# Алфавит «числа»: всё, что из него состоит, считается float‑ом,
# даже если float() его не понимает (тогда значение = 0.0).
_FLOAT_CHARS = frozenset("+-.0123456789eE")

KEYWORDS = {
    "v": "vertex (v)",
    "vt": "texture coordinate (vt)",
    "vn": "normal (vn)",
    "f": "face (f)",
    "o": "object (o)",
    "g": "group (g)",
    "s": "smoothing group (s)",
    "usemtl": "material (usemtl)",
    "mtllib": "material library (mtllib)",
}

CORNER_PATTERNS = ("p", "p/t", "p/t/n", "p//n")

Token = Tuple[str, int]   # (текст, колонка)


# ---------------------------------------------------------------------
# Публичный API
# ---------------------------------------------------------------------
def parse(text: str) -> List[Directive]:
    """Разобрать весь текст файла в упорядоченный список директив."""
    directives: List[Directive] = []
    lineno = 0
    for lineno, raw in enumerate(_LINE_BREAK_RE.split(text), start=1):
        directive = parse_line(raw, lineno)
        if directive is not None:
            directives.append(directive)
    logger.debug(f"[Parser] {len(directives)} directives from {lineno} lines")
    return directives


def parse_line(raw: str, lineno: int = 1) -> Optional[Directive]:
    """Разобрать одну строку; None для пустых строк и комментариев."""
    return _LineParser(raw, lineno).run()


# ---------------------------------------------------------------------
# Разбор одной строки
# ---------------------------------------------------------------------
class _LineParser:
    def __init__(self, raw: str, lineno: int):
        self.raw = raw
        self.lineno = lineno
        # хвостовой комментарий отбрасываем – колонки при этом не сдвигаются
        comment = _COMMENT_RE.search(raw)
        self.content = (raw[:comment.start()] if comment else raw).rstrip()
        self.tokens: List[Token] = [
            (m.group(), m.start()) for m in _TOKEN_RE.finditer(self.content)
        ]

    def fail(self, column: int, *expected: str) -> ParseError:
        return ParseError(self.lineno, self.raw, expected, column)

    @property
    def end_column(self) -> int:
        return len(self.content)

    def run(self) -> Optional[Directive]:
        if not self.tokens:
            return None
        keyword, column = self.tokens[0]
        args = self.tokens[1:]

        if keyword == "v":
            return Vertex(*self._floats(args, 3, 3))
        if keyword == "vn":
            n = Vec3(*self._floats(args, 3, 3)).normalized()
            return VertexNormal(n.x, n.y, n.z)
        if keyword == "vt":
            u, v = self._floats(args, 2, 3)[:2]
            return VertexTexture(u, v)
        if keyword == "f":
            return self._face(args)
        if keyword == "g":
            return GroupName(self._rest(args, required=False))
        if keyword == "o":
            return ObjectName(self._rest(args))
        if keyword == "s":
            return SmoothingGroup(self._single(args, "smoothing group (off or number)"))
        if keyword == "usemtl":
            return UseMaterial(self._rest(args))
        if keyword == "mtllib":
            return MaterialLib(self._rest(args))

        raise self.fail(column, *KEYWORDS.values())

    # -----------------------------------------------------------------
    # Числа
    # -----------------------------------------------------------------
    def _floats(self, args: List[Token], least: int, most: int) -> List[float]:
        if len(args) < least:
            raise self.fail(self.end_column, "number")
        if len(args) > most:
            raise self.fail(args[most][1], "end of line")
        return [self._float(tok) for tok in args]

    def _float(self, token: Token) -> float:
        text, column = token
        for offset, ch in enumerate(text):
            if ch not in _FLOAT_CHARS:
                raise self.fail(column + offset, "number")
        try:
            return float(text)
        except ValueError:
            # «1.2.3», «-», «.» – похоже на число, но не число
            logger.debug(f"[Parser] line {self.lineno}: malformed number {text!r} read as 0.0")
            return 0.0

    # -----------------------------------------------------------------
    # Имена
    # -----------------------------------------------------------------
    def _rest(self, args: List[Token], required: bool = True) -> str:
        if not args:
            if required:
                raise self.fail(self.end_column, "name")
            return ""
        return self.content[args[0][1]:].strip()

    def _single(self, args: List[Token], what: str) -> str:
        if not args:
            raise self.fail(self.end_column, what)
        if len(args) > 1:
            raise self.fail(args[1][1], "end of line")
        return args[0][0]

    # -----------------------------------------------------------------
    # Грани
    # -----------------------------------------------------------------
    def _face(self, args: List[Token]) -> Face:
        if len(args) > 4:
            raise self.fail(args[4][1], "end of line (faces have 3 or 4 corners)")

        corners = []
        pattern = None
        for token in args:
            corner_pattern, corner = self._corner(token)
            if pattern is None:
                pattern = corner_pattern
            elif corner_pattern != pattern:
                raise self.fail(token[1], f"{pattern} corner")
            corners.append(corner)

        if len(corners) < 3:
            raise self.fail(self.end_column, "corner")

        if pattern in ("p", "p/t"):
            raise UnsupportedFaceError(
                self.lineno, self.raw, ["p//n corner", "p/t/n corner"], args[0][1]
            )
        return Face(tuple(corners), line=self.lineno)

    def _corner(self, token: Token) -> Tuple[str, Optional[Corner]]:
        text, column = token
        parts = text.split("/")
        if len(parts) == 1:
            pattern = "p"
        elif len(parts) == 2:
            pattern = "p/t"
        elif len(parts) == 3:
            pattern = "p//n" if parts[1] == "" else "p/t/n"
        else:
            raise self.fail(column, *(f"{p} corner" for p in CORNER_PATTERNS))

        offset = 0
        values = []
        for i, part in enumerate(parts):
            if part == "" and pattern == "p//n" and i == 1:
                values.append(None)
            elif _DIGITS_RE.fullmatch(part):
                values.append(int(part))
            else:
                raise self.fail(column + offset, "index (positive integer)")
            offset += len(part) + 1

        if pattern == "p/t/n":
            return pattern, Corner(values[0], values[1], values[2])
        if pattern == "p//n":
            return pattern, Corner(values[0], None, values[2])
        # формы без нормали всё равно отклоняются в _face()
        return pattern, None
