"""Standalone HTML document wrapper for raw note exports."""

from string import Template

HTML_DOCUMENT_TEMPLATE = Template("""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>$title</title>
    <style>
        body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; line-height: 1.6; max-width: 800px; margin: 0 auto; padding: 20px; }
        .callout { border-left: 4px solid #3b82f6; padding: 1rem; margin: 1rem 0; background-color: #f8fafc; }
        .callout.info { border-left-color: #3b82f6; background-color: #eff6ff; }
        .callout.warning { border-left-color: #f59e0b; background-color: #fffbeb; }
        .callout.error { border-left-color: #ef4444; background-color: #fef2f2; }
        .callout.success { border-left-color: #10b981; background-color: #ecfdf5; }
        table { border-collapse: collapse; width: 100%; margin: 1rem 0; }
        th, td { border: 1px solid #d1d5db; padding: 0.5rem; text-align: left; }
        th { background-color: #f9fafb; font-weight: 600; }
        pre { background-color: #f3f4f6; padding: 1rem; border-radius: 0.375rem; overflow-x: auto; }
        code { background-color: #f3f4f6; padding: 0.125rem 0.25rem; border-radius: 0.25rem; font-family: 'Monaco', 'Menlo', monospace; }
    </style>
</head>
<body>
    <h1>$title</h1>
    $content
</body>
</html>""")


def render_html_document(title: str, content: str) -> str:
    """Wrap note content verbatim in the standalone document skeleton."""
    return HTML_DOCUMENT_TEMPLATE.substitute(title=title, content=content)


__all__ = ['HTML_DOCUMENT_TEMPLATE', 'render_html_document']
