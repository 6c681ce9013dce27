from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SemverLikeVersion:
    original: str
    leading_v: bool = False
    components: tuple[int, ...] = field(default_factory=tuple)
    build: str = ""

    def fetch(self, index: int) -> int:
        """Return component ``index``, or 0 when the version has fewer components."""
        if index < len(self.components):
            return self.components[index]
        return 0


def _parse(text: str) -> SemverLikeVersion:
    leading_v = text.startswith("v")
    line = text[1:] if leading_v else text

    components: list[int] = []
    current = ""
    found_build = False
    for c in line:
        if found_build:
            current += c
            continue
        if "0" <= c <= "9":
            current += c
            continue
        # any other character ends the component being read
        if current:
            components.append(int(current))
            current = ""
        if c == ".":
            continue
        found_build = True
        current = c

    if not found_build and current:
        components.append(int(current))
        current = ""

    return SemverLikeVersion(original=text, leading_v=leading_v, components=tuple(components), build=current)


def parse_semver_like(text: str, max_components: int = -1) -> SemverLikeVersion:
    """Parse a loosely semver-shaped version such as ``1.20``, ``v2.3.4-rc1`` or ``1.2.3.4``.

    Args:
        text: Raw version string.
        max_components: Keep at most this many numeric components; the rest are
            folded into the build string. ``-1`` keeps all of them.

    Examples:
        >>> parse_semver_like("1.20", 3).components
        (1, 20)
        >>> parse_semver_like("1.2.3.4", 3).build
        '.4'
    """
    v = _parse(text)
    if max_components == -1 or len(v.components) <= max_components:
        return v

    extra = "".join(f".{c}" for c in v.components[max_components:])
    return SemverLikeVersion(
        original=v.original,
        leading_v=v.leading_v,
        components=v.components[:max_components],
        build=extra + v.build,
    )
