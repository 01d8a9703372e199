from collections import namedtuple
import html
import re

import markdown
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor
from markdown.util import HTML_PLACEHOLDER_RE, STX, ETX

MD_EXTENSIONS = [
    'tables',
    'footnotes',
    'fenced_code',
    'pymdownx.tilde',
    'pymdownx.tasklist',
]

MD_EXTENSION_CONFIGS = {
    # ~~text~~ only, single tildes stay literal
    'pymdownx.tilde': {'subscript': False},
}

PAGE_STYLE = """body { font-family: Arial, sans-serif; line-height: 1.6; padding: 20px; max-width: 800px; margin: 0 auto; }
pre { background-color: #f4f4f4; padding: 12px; border-radius: 4px; overflow-x: auto; }
code { background-color: #f4f4f4; padding: 2px 4px; border-radius: 4px; }"""

ESCAPED_CHAR_RE = re.compile(f'{STX}([0-9]+){ETX}')
ENTITY_RE = re.compile(r'&(#[0-9]+|#[xX][0-9a-fA-F]+|[A-Za-z][A-Za-z0-9]*);')

Document = namedtuple('Document', ['title', 'body'])


class ConversionError(OSError):
    pass


class TitleTreeprocessor(Treeprocessor):
    """Record the plain text of the first level-one heading as `md.title`.

    Runs after inline processing, so code spans and footnote references are
    elements of their own and raw HTML is still a stash placeholder.
    """

    def run(self, root):
        heading = next(root.iter('h1'), None)
        self.md.title = '' if heading is None else ''.join(self.text_runs(heading))

    def text_runs(self, element):
        if element.text:
            yield self.plain(element.text)
        for child in element:
            if not self.skipped(child):
                if child.tag == 'img':
                    yield child.get('alt', '')
                yield from self.text_runs(child)
            if child.tail:
                yield self.plain(child.tail)

    def skipped(self, element):
        if element.tag == 'code':
            return True
        return element.tag == 'sup' and element.get('id', '').startswith('fnref')

    def plain(self, text):
        def stashed(match):
            raw = self.md.htmlStash.rawHtmlBlocks[int(match.group(1))]
            # Entities are stashed like raw tags; only the entities are text
            if ENTITY_RE.fullmatch(str(raw)):
                return html.unescape(str(raw))
            return ''

        text = HTML_PLACEHOLDER_RE.sub(stashed, text)
        return ESCAPED_CHAR_RE.sub(lambda m: chr(int(m.group(1))), text)


class TitleExtension(Extension):
    def extendMarkdown(self, md):
        md.title = ''
        md.treeprocessors.register(TitleTreeprocessor(md), 'title', 5)


def parse_markdown(source):
    """Convert markdown source, returning (title, html fragment)"""
    md = markdown.Markdown(extensions=MD_EXTENSIONS + [TitleExtension()],
                           extension_configs=MD_EXTENSION_CONFIGS)
    try:
        fragment = md.convert(source)
    except Exception as e:
        raise ConversionError(f"Could not convert markdown: {e}") from e
    return md.title, fragment


def render_markdown(source):
    return parse_markdown(source)[1]


def extract_title(source):
    return parse_markdown(source)[0]


def wrap_page(fragment, title):
    return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="UTF-8">
<title>{html.escape(title)}</title>
<style>
{PAGE_STYLE}
</style>
</head>
<body>
{fragment}
</body>
</html>"""


def convert(source, name):
    """Convert markdown source into a Document.

    The page title falls back to `name` (the file's base name) when the
    source has no top-level heading; the returned title stays empty.
    """
    title, fragment = parse_markdown(source)
    return Document(title, wrap_page(fragment, title or name))
