"""File I/O utility functions for togglipy."""
import os
import csv
import sys
import markdown
from datetime import date

HTML_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
body {{ font-family: -apple-system, "Segoe UI", Roboto, sans-serif; max-width: 960px; margin: 2rem auto; color: #222; }}
table {{ border-collapse: collapse; width: 100%; margin-bottom: 1rem; }}
th, td {{ border: 1px solid #ddd; padding: 0.4rem 0.6rem; text-align: left; vertical-align: top; }}
th {{ background: #f4f4f4; }}
</style>
</head>
<body>
{body}
</body>
</html>
"""


def write_csv(filename: str, headers: list, rows: list):
    """Write data to a CSV file.

    Args:
        filename: Output file name
        headers: Column headers
        rows: Data rows
    """
    with open(filename, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(headers)
        writer.writerows(rows)


def write_markdown(md_path: str, content: str, start_date: date, end_date: date, overwrite: bool = False):
    """Write content to a Markdown file.

    Args:
        md_path: Output file path
        content: Markdown content
        start_date: Start date for the title
        end_date: End date for the title
        overwrite: Whether to overwrite the file if it exists
    """
    file_exists = os.path.exists(md_path)
    if file_exists and not overwrite:
        mode = 'a'
        print(f"[INFO] File '{md_path}' exists. Appending output.")
    elif file_exists and overwrite:
        mode = 'w'
        print(f"[INFO] File '{md_path}' exists. Overwriting as requested.")
    else:
        mode = 'w'
        print(f"[INFO] File '{md_path}' does not exist. Creating new file.")

    try:
        with open(md_path, mode, encoding='utf-8') as f:
            if mode == 'w' or (mode == 'a' and os.stat(md_path).st_size == 0):
                f.write(f"# Time Summary {start_date} to {end_date}\n\n")
            f.write(content)
    except OSError as e:
        print(f"[ERROR] Failed to write to '{md_path}': {e}")
        sys.exit(2)

    # Validate by converting to HTML (will raise if invalid)
    try:
        with open(md_path, 'r', encoding='utf-8') as f:
            md_text = f.read()
        markdown.markdown(md_text)
    except Exception as e:
        print(f"[ERROR] Markdown validation failed for '{md_path}': {e}")
        sys.exit(3)


def render_html(content: str, title: str) -> str:
    """Convert Markdown content into a standalone HTML page.

    Args:
        content: Markdown content
        title: Page title

    Returns:
        HTML document
    """
    body = markdown.markdown(content, extensions=['tables'])
    return HTML_PAGE.format(title=title, body=body)


def write_html(html_path: str, content: str, title: str):
    """Render Markdown content to HTML and write it to a file.

    Args:
        html_path: Output file path
        content: Markdown content
        title: Page title
    """
    try:
        with open(html_path, 'w', encoding='utf-8') as f:
            f.write(render_html(content, title))
    except OSError as e:
        print(f"[ERROR] Failed to write to '{html_path}': {e}")
        sys.exit(2)
