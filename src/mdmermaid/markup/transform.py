"""Block and inline transformation.

An ordered chain of ``str -> str`` stages. Order matters: later stages see
the markup produced by earlier ones.

  (wiki links when extensions are on)
  1. headings (### before ## before #), with slug ids when extensions are on
  2. bold
  3. italic
  4. inline code
  5. fenced code (diagram fences are gone by now)
  6. list items, then grouping of adjacent items into one list
  7. links
  8. horizontal rules
  (callouts, blockquotes and tables when extensions are on)
  9. paragraphs

Nothing is escaped here; see RenderConfig.escape_html. When it is set, link
targets outside http, https and mailto are dropped and only the link text kept.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from mdmermaid.config import RenderConfig
from mdmermaid.markup.blocks import classify, split_segments
from mdmermaid.syntax.types import BlockKind

Stage = Callable[[str], str]

# ─── Styles ──────────────────────────────────────────────────────────────────

H1_CLASS = "text-2xl font-bold mb-6 mt-8 text-gray-900 dark:text-gray-100"
H2_CLASS = "text-xl font-semibold mb-4 mt-8 text-gray-900 dark:text-gray-100"
H3_CLASS = "text-lg font-semibold mb-3 mt-6 text-gray-900 dark:text-gray-100"
STRONG_CLASS = "font-semibold text-gray-900 dark:text-gray-100"
EM_CLASS = "italic text-gray-700 dark:text-gray-300"
CODE_CLASS = "bg-gray-100 dark:bg-gray-800 px-2 py-1 rounded text-sm font-mono text-gray-800 dark:text-gray-200"
PRE_CLASS = "bg-gray-100 dark:bg-gray-800 p-4 rounded-lg overflow-x-auto my-4 border border-gray-200 dark:border-gray-700"
PRE_CODE_CLASS = "text-sm text-gray-800 dark:text-gray-200"
UL_ITEM_CLASS = "ml-4 list-disc text-gray-700 dark:text-gray-300"
OL_ITEM_CLASS = "ml-4 list-decimal text-gray-700 dark:text-gray-300"
LIST_CLASS = "space-y-1 my-4 pl-4"
LINK_CLASS = "text-blue-600 dark:text-blue-400 hover:underline"
HR_CLASS = "my-6 border-gray-300 dark:border-gray-600"
P_CLASS = "mb-4 text-gray-700 dark:text-gray-300 leading-relaxed"
BLOCKQUOTE_CLASS = "border-l-4 border-gray-300 dark:border-gray-600 pl-4 my-4 text-gray-600 dark:text-gray-400 italic"
TABLE_WRAP_CLASS = "overflow-x-auto my-6 rounded-lg border border-gray-200 dark:border-gray-700"
TABLE_CLASS = "min-w-full table-auto"
TH_CLASS = "px-6 py-3 text-left font-semibold text-gray-900 dark:text-gray-100 border-b-2 border-gray-200"
TD_CLASS = "px-6 py-4 text-gray-700 dark:text-gray-300 border-b border-gray-200"
WIKI_LINK_CLASS = "obsidian-link internal-link text-blue-600 dark:text-blue-400 hover:underline font-medium"
CALLOUT_CLASS = "callout border-l-4 p-4 my-4 rounded-r-lg"
CALLOUT_TITLE_CLASS = "font-semibold text-gray-900 dark:text-gray-100 mb-2"
CALLOUT_COLORS: dict[str, str] = {
    "note": "border-l-blue-500 bg-blue-50 dark:bg-blue-950/20",
    "info": "border-l-cyan-500 bg-cyan-50 dark:bg-cyan-950/20",
    "tip": "border-l-green-500 bg-green-50 dark:bg-green-950/20",
    "warning": "border-l-yellow-500 bg-yellow-50 dark:bg-yellow-950/20",
    "danger": "border-l-red-500 bg-red-50 dark:bg-red-950/20",
}

# ─── Patterns ────────────────────────────────────────────────────────────────

_H3_RE = re.compile(r"^### (.*)$", re.MULTILINE)
_H2_RE = re.compile(r"^## (.*)$", re.MULTILINE)
_H1_RE = re.compile(r"^# (.*)$", re.MULTILINE)
_BOLD_RE = re.compile(r"\*\*(.*?)\*\*")
_ITALIC_RE = re.compile(r"\*(.*?)\*")
# A backtick that belongs to a run (a fence) neither opens nor closes a span.
_INLINE_CODE_RE = re.compile(r"(?<!`)`([^`]+)`(?!`)")
_STAR_ITEM_RE = re.compile(r"^\* (.+)$", re.MULTILINE)
_DASH_ITEM_RE = re.compile(r"^- (.+)$", re.MULTILINE)
_ORDERED_ITEM_RE = re.compile(r"^\d+\. (.+)$", re.MULTILINE)
# Items separated by at most one line break form a single list.
_ITEM_RUN_RE = re.compile(r"<li[^>]*>.*?</li>(?:[ \t]*\n?[ \t]*<li[^>]*>.*?</li>)*")
_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
_RULE_RE = re.compile(r"^---$", re.MULTILINE)
_WIKI_HEADER_LINK_RE = re.compile(r"\[\[#([^\]]+)\]\]")
_WIKI_LINK_RE = re.compile(r"\[\[([^\]#]+)\]\]")
_SLUG_DROP_RE = re.compile(r"[^\w\s-]")
_WHITESPACE_RE = re.compile(r"\s+")
_TAG_RE = re.compile(r"<[^>]*>")
# Targets without a scheme are relative; anything else must be listed here.
_SCHEME_RE = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.-]*):")
_SAFE_SCHEMES = frozenset({"http", "https", "mailto"})
_CALLOUT_RE = re.compile(r"^(?:>|&gt;) \[!(note|info|tip|warning|danger)\] (.*)$", re.MULTILINE | re.IGNORECASE)
_BLOCKQUOTE_RE = re.compile(r"^(?:>|&gt;) (.+)$", re.MULTILINE)
_TABLE_RE = re.compile(
    r"^\|(.+)\|[ \t]*\n\|[ \t:|-]+\|[ \t]*\n((?:\|.+\|[ \t]*(?:\n|$))+)",
    re.MULTILINE,
)


def fenced_code_pattern(diagram_tag: str) -> re.Pattern[str]:
    return re.compile(r"```(?!" + re.escape(diagram_tag) + r")(?:([^\s`]*)\n)?(.*?)```", re.DOTALL)


# ─── Stages ──────────────────────────────────────────────────────────────────


def headings(text: str) -> str:
    text = _H3_RE.sub(rf'<h3 class="{H3_CLASS}">\1</h3>', text)
    text = _H2_RE.sub(rf'<h2 class="{H2_CLASS}">\1</h2>', text)
    return _H1_RE.sub(rf'<h1 class="{H1_CLASS}">\1</h1>', text)


def slugify(title: str) -> str:
    """Anchor id for a heading: lowercase words joined by hyphens, tags and punctuation dropped."""
    text = _SLUG_DROP_RE.sub("", _TAG_RE.sub("", title).lower()).strip()
    return _WHITESPACE_RE.sub("-", text)


def headings_with_ids(text: str) -> str:
    for pattern, tag, css in ((_H3_RE, "h3", H3_CLASS), (_H2_RE, "h2", H2_CLASS), (_H1_RE, "h1", H1_CLASS)):
        text = pattern.sub(
            lambda m, tag=tag, css=css: f'<{tag} id="{slugify(m.group(1))}" class="{css}">{m.group(1)}</{tag}>',
            text,
        )
    return text


def _wiki_anchor(target: str) -> str:
    header = target.replace('"', "&quot;")
    return f'<a href="#{slugify(target)}" class="{WIKI_LINK_CLASS}" data-header="{header}">{target}</a>'


def wiki_links(text: str) -> str:
    text = _WIKI_HEADER_LINK_RE.sub(lambda m: _wiki_anchor(m.group(1)), text)
    return _WIKI_LINK_RE.sub(lambda m: _wiki_anchor(m.group(1)), text)


def bold(text: str) -> str:
    return _BOLD_RE.sub(rf'<strong class="{STRONG_CLASS}">\1</strong>', text)


def italic(text: str) -> str:
    return _ITALIC_RE.sub(rf'<em class="{EM_CLASS}">\1</em>', text)


def inline_code(text: str) -> str:
    return _INLINE_CODE_RE.sub(rf'<code class="{CODE_CLASS}">\1</code>', text)


def list_items(text: str) -> str:
    text = _STAR_ITEM_RE.sub(rf'<li class="{UL_ITEM_CLASS}">\1</li>', text)
    text = _DASH_ITEM_RE.sub(rf'<li class="{UL_ITEM_CLASS}">\1</li>', text)
    text = _ORDERED_ITEM_RE.sub(rf'<li class="{OL_ITEM_CLASS}">\1</li>', text)
    return _ITEM_RUN_RE.sub(rf'<ul class="{LIST_CLASS}">\g<0></ul>', text)


def rules(text: str) -> str:
    return _RULE_RE.sub(f'<hr class="{HR_CLASS}">', text)


def _callout(m: re.Match[str]) -> str:
    kind = m.group(1).lower()
    return (
        f'<div class="{CALLOUT_CLASS} callout-{kind} {CALLOUT_COLORS[kind]}">'
        f'<div class="{CALLOUT_TITLE_CLASS}">{m.group(2)}</div></div>'
    )


def callouts(text: str) -> str:
    return _CALLOUT_RE.sub(_callout, text)


def blockquotes(text: str) -> str:
    return _BLOCKQUOTE_RE.sub(rf'<blockquote class="{BLOCKQUOTE_CLASS}">\1</blockquote>', text)


def _cells(row: str) -> list[str]:
    return [cell.strip() for cell in row.split("|") if cell.strip()]


def _table(m: re.Match[str]) -> str:
    head = "".join(f'<th class="{TH_CLASS}">{cell}</th>' for cell in _cells(m.group(1)))
    body = "".join(
        "<tr>" + "".join(f'<td class="{TD_CLASS}">{cell}</td>' for cell in _cells(row)) + "</tr>"
        for row in m.group(2).strip().split("\n")
    )
    trailing = "\n" if m.group(0).endswith("\n") else ""
    return (
        f'<div class="{TABLE_WRAP_CLASS}"><table class="{TABLE_CLASS}">'
        f"<thead><tr>{head}</tr></thead><tbody>{body}</tbody></table></div>{trailing}"
    )


def tables(text: str) -> str:
    return _TABLE_RE.sub(_table, text)


def is_safe_target(href: str) -> bool:
    """Relative targets and http(s)/mailto URLs; control characters are ignored as browsers do."""
    m = _SCHEME_RE.match(re.sub(r"[\x00-\x20]", "", href))
    return m is None or m.group(1).lower() in _SAFE_SCHEMES


class Transformer:
    """Runs the block/inline stages in their fixed order."""

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config = config or RenderConfig()
        self._fence_re = fenced_code_pattern(self.config.diagram_tag)

    def fenced_code(self, text: str) -> str:
        def _block(m: re.Match[str]) -> str:
            lang = m.group(1)
            code_class = f"language-{lang} {PRE_CODE_CLASS}" if lang else PRE_CODE_CLASS
            return f'<pre class="{PRE_CLASS}"><code class="{code_class}">{m.group(2)}</code></pre>'

        return self._fence_re.sub(_block, text)

    def links(self, text: str) -> str:
        def _anchor(m: re.Match[str]) -> str:
            href = m.group(2)
            if self.config.escape_html:
                if not is_safe_target(href):
                    return m.group(1)
                href = href.replace('"', "&quot;")
            return f'<a href="{href}" class="{LINK_CLASS}" target="_blank" rel="noopener noreferrer">{m.group(1)}</a>'

        return _LINK_RE.sub(_anchor, text)

    def paragraphs(self, text: str) -> str:
        out: list[str] = []
        for segment in split_segments(text):
            if classify(segment, self.config.extensions) is BlockKind.Paragraph:
                out.append(f'<p class="{P_CLASS}">{segment}</p>')
            else:
                out.append(segment)
        return "\n".join(out)

    def stages(self) -> list[Stage]:
        chain: list[Stage] = [wiki_links, headings_with_ids] if self.config.extensions else [headings]
        chain += [
            bold,
            italic,
            inline_code,
            self.fenced_code,
            list_items,
            self.links,
            rules,
        ]
        if self.config.extensions:
            chain.extend([callouts, blockquotes, tables])
        chain.append(self.paragraphs)
        return chain

    def transform(self, text: str) -> str:
        for stage in self.stages():
            text = stage(text)
        return text


def transform(text: str, config: RenderConfig | None = None) -> str:
    """Convert text (diagram fences already replaced) into block/inline markup."""
    return Transformer(config).transform(text)
