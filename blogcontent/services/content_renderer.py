import logging
import re

from markdown_it import MarkdownIt

logger = logging.getLogger(__name__)

# CommonMark with raw HTML passthrough, plus GFM tables
md = MarkdownIt("commonmark", {"html": True}).enable("table")

# Tag names are matched case-sensitively: <callout> and <CallOut> are left alone.
callout_pattern = re.compile(
    r'<Callout\s+type="(info|warning|error)"[^>]*(?<!/)>([\s\S]*?)</Callout>'
)
self_closing_callout_pattern = re.compile(
    r'<Callout\s+type="(info|warning|error)"[^>]*/>'
)
highlight_pattern = re.compile(r"<(Mark|Highlight)>([\s\S]*?)</\1>")


def replace_components(content: str) -> str:
    """
    Rewrite the custom MDX components into plain HTML.
    Inner content is kept verbatim and is not processed as Markdown.
    """
    content = callout_pattern.sub(r'<div class="callout callout-\1">\2</div>', content)
    content = self_closing_callout_pattern.sub(
        r'<div class="callout callout-\1"></div>', content
    )
    content = highlight_pattern.sub(r'<mark class="mdx-highlight">\2</mark>', content)
    return content


def render_content(content: str) -> str:
    """Convert a post body to HTML. Blank input renders as an empty string."""
    processed = replace_components(content)
    html = md.render(processed).strip()
    if not html:
        return ""
    logger.debug(f"Rendered {len(content)} chars of markdown to {len(html)} of html")
    return html + "\n"
