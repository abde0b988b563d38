from __future__ import annotations

"""
Relative link rewriting for Markdown documents shipped in a package.

The marketplace renders README/CHANGELOG outside the repository, so relative
link targets are made absolute:
  - inline links      [text](target "title")  -> base_content_url
  - inline images     ![alt](src)             -> base_images_url
  - reference defs    [id]: target            -> images base when an image uses [id]
Absolute targets (any scheme, protocol-relative, #anchors) are left alone, as is
everything inside fenced code blocks and inline code spans.
"""

import posixpath
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Set

_REPO_RE = re.compile(r"^https://(?P<host>[^/\s]+)/(?P<owner>[^/\s]+)/(?P<repo>[^/\s]+?)(?:\.git)?/?$")
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")

_FENCE_RE = re.compile(r"^( {0,3})(`{3,}|~{3,})[^\n]*\n.*?(?:^ {0,3}\2[`~]*[ \t]*$|\Z)", re.MULTILINE | re.DOTALL)

# text part tolerates one level of nested image ([![badge](x.svg)](link))
_INLINE_RE = re.compile(
    r"(?P<bang>!?)\[(?P<text>(?:\\.|!\[[^\]]*\]\([^)]*\)|[^\[\]\\])*)\]"
    r"\(\s*(?P<target><[^>\n]*>|[^\s()]+)(?P<tail>(?:\s+(?:\"[^\"]*\"|'[^']*'|\([^)]*\)))?\s*)\)"
)
_REFDEF_RE = re.compile(r"^(?P<lead> {0,3}\[(?P<label>[^\]^][^\]]*)\]:[ \t]*)(?P<target><[^>\n]*>|\S+)", re.MULTILINE)
_IMAGE_REF_RE = re.compile(r"!\[(?P<alt>[^\]]*)\](?:\[(?P<label>[^\]]*)\]|(?!\())")
_CODE_SPAN_RE = re.compile(r"(?<!`)(?P<ticks>`+)(?!`).+?(?<!`)(?P=ticks)(?!`)")
_MASK_RE = re.compile(r"\x00(\d+)\x00")


@dataclass(frozen=True)
class BaseUrls:
    content: Optional[str] = None
    images: Optional[str] = None

    def __bool__(self) -> bool:
        return bool(self.content or self.images)


def derive_base_urls(repository_url: Optional[str]) -> BaseUrls:
    """`https://<host>/<owner>/<repo>[.git]` -> blob/master and raw/master bases."""
    if not repository_url:
        return BaseUrls()
    m = _REPO_RE.match(repository_url.strip())
    if not m:
        return BaseUrls()
    root = f"https://{m.group('host')}/{m.group('owner')}/{m.group('repo')}"
    return BaseUrls(content=f"{root}/blob/master", images=f"{root}/raw/master")


def resolve_base_urls(
    base_content_url: Optional[str],
    base_images_url: Optional[str],
    repository_url: Optional[str],
) -> BaseUrls:
    """
    Explicit URLs win one by one; the gaps are filled from the repository.
    With no images base from either source, images share the content base.
    """
    derived = derive_base_urls(repository_url)
    return BaseUrls(
        content=base_content_url or derived.content,
        images=base_images_url or derived.images or base_content_url,
    )


def is_relative_target(target: str) -> bool:
    if not target or target.startswith("#") or target.startswith("//"):
        return False
    return not _SCHEME_RE.match(target)


def join_url(base: str, target: str) -> str:
    """Root-relative join: `base` + normalized `target`, keeping ?query/#fragment."""
    cut = len(target)
    for sep in ("?", "#"):
        i = target.find(sep)
        if i != -1:
            cut = min(cut, i)
    path, suffix = target[:cut], target[cut:]
    norm = posixpath.normpath("/" + path.lstrip("/"))
    if path.endswith("/") and not norm.endswith("/"):
        norm += "/"
    return base.rstrip("/") + norm + suffix


def _rewrite_target(target: str, base: Optional[str]) -> str:
    bracketed = target.startswith("<") and target.endswith(">")
    raw = target[1:-1] if bracketed else target
    if base is None or not is_relative_target(raw):
        return target
    joined = join_url(base, raw)
    return f"<{joined}>" if bracketed else joined


def _image_labels(text: str) -> Set[str]:
    labels: Set[str] = set()
    for m in _IMAGE_REF_RE.finditer(text):
        label = m.group("label")
        labels.add((label or m.group("alt")).strip().lower())
    return labels


def _rewrite_prose(text: str, bases: BaseUrls) -> str:
    spans: List[str] = []

    def mask(m: "re.Match[str]") -> str:
        spans.append(m.group(0))
        return f"\x00{len(spans) - 1}\x00"

    text = _CODE_SPAN_RE.sub(mask, text)

    def inline(m: "re.Match[str]") -> str:
        is_image = m.group("bang") == "!"
        inner = _INLINE_RE.sub(inline, m.group("text"))
        target = _rewrite_target(m.group("target"), bases.images if is_image else bases.content)
        return f"{m.group('bang')}[{inner}]({target}{m.group('tail')})"

    out = _INLINE_RE.sub(inline, text)

    image_labels = _image_labels(text)

    def refdef(m: "re.Match[str]") -> str:
        base = bases.images if m.group("label").strip().lower() in image_labels else bases.content
        return m.group("lead") + _rewrite_target(m.group("target"), base)

    out = _REFDEF_RE.sub(refdef, out)
    return _MASK_RE.sub(lambda m: spans[int(m.group(1))], out)


def _outside_fences(text: str, fn: Callable[[str], str]) -> str:
    parts = []
    pos = 0
    for m in _FENCE_RE.finditer(text):
        parts.append(fn(text[pos:m.start()]))
        parts.append(m.group(0))
        pos = m.end()
    parts.append(fn(text[pos:]))
    return "".join(parts)


def rewrite_relative_links(text: str, bases: BaseUrls) -> str:
    """Pure: the same text and bases always give the same output."""
    if not bases:
        return text
    return _outside_fences(text, lambda chunk: _rewrite_prose(chunk, bases))


__all__ = [
    "BaseUrls",
    "derive_base_urls",
    "is_relative_target",
    "join_url",
    "resolve_base_urls",
    "rewrite_relative_links",
]
