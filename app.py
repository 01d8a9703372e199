from flask import Flask, render_template_string
from urllib.parse import quote
import html

from store import DocumentStore

NO_TITLE = '[No title]'

INDEX_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<title>Markdown Files</title>
<style>
body { font-family: Arial, sans-serif; line-height: 1.6; padding: 20px; max-width: 800px; margin: 0 auto; }
li { margin-bottom: 8px; }
</style>
</head>
<body>
<h1>Available Files</h1>
<ul>
{% for document in documents %}
<li><a href="{{ document.href }}">{{ document.label }}</a></li>
{% endfor %}
</ul>
</body>
</html>"""

app = Flask(__name__)
app.config['DOCUMENTS'] = DocumentStore()


@app.route('/')
def index():
    documents = [
        {
            'href': '/' + quote(name),
            'label': f"{name} - {document.title or NO_TITLE}",
        }
        for name, document in app.config['DOCUMENTS'].items()
    ]
    return render_template_string(INDEX_TEMPLATE, documents=documents)


@app.route('/<name>')
def view_document(name):
    document = app.config['DOCUMENTS'].get(name)
    if document is None:
        return f"<h1>File not found: {html.escape(name)}</h1>"

    return document.body
