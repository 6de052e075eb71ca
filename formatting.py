import re

BOLD = re.compile(r'\*\*(.*?)\*\*')
ITALIC = re.compile(r'\*(.*?)\*')
COLOR = re.compile(r'\[([^\]]+)\]\s*\((#[0-9a-fA-F]{3,8})\)')
LINK = re.compile(r'\[([^\]]+)\]\s*\(([^)]+)\)')


def escape_html(text):
    return (text.replace('&', '&amp;').replace('<', '&lt;').replace('>', '&gt;')
            .replace('"', '&quot;'))


def format_text(text):
    """Render the small markup language used in window content to HTML.

    Supports **bold**, *italic*, [text](#hex) colors, [text](url) links,
    "- " bullet lists and one paragraph per non-blank line.
    """
    if not text:
        return ""

    formatted = escape_html(text)
    formatted = BOLD.sub(r'<strong>\1</strong>', formatted)
    formatted = ITALIC.sub(r'<em>\1</em>', formatted)
    # Colors first so "#hex" targets never become links
    formatted = COLOR.sub(r'<span style="color: \2">\1</span>', formatted)
    formatted = LINK.sub(r'<a href="\2" target="_blank" rel="noopener noreferrer">\1</a>', formatted)

    output = []
    in_list = False
    for line in formatted.split('\n'):
        stripped = line.strip()
        if stripped.startswith('- '):
            if not in_list:
                output.append('<ul>')
                in_list = True
            output.append(f'<li>{stripped[2:]}</li>')
            continue

        if in_list:
            output.append('</ul>')
            in_list = False
        if stripped:
            output.append(f'<p>{line}</p>')

    if in_list:
        output.append('</ul>')

    return ''.join(output)
