APP_ORG = "QuickTools"
APP_NAME = "PyOutlineEditor"

CSS_EXPORT = """
:root { --bg:#ffffff; --fg:#111; --muted:#555; --border:#ddd; --link:#0b6bfd; }
@media (prefers-color-scheme: dark) {
  :root { --bg:#0f1115; --fg:#e7e9ee; --muted:#a0a4ae; --border:#2a2f3a; --link:#7aa2ff; }
}
html,body { background:var(--bg); color:var(--fg); }
body { font-family: -apple-system, Segoe UI, Roboto, Helvetica, Arial, sans-serif; margin: 1.25rem; line-height: 1.55; }
ul { padding-left:1.5rem; list-style: none; }
li.task-done { color:var(--muted); text-decoration: line-through; }
a { color:var(--link); text-decoration:none; } a:hover { text-decoration:underline; }
"""

HTML_TEMPLATE = """<!doctype html>
<html>
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width, initial-scale=1.0"/>
<title>{title}</title>
<style>{css}</style>
</head>
<body>
{body}
</body>
</html>
"""

SETTINGS_GEOMETRY = "window/geometry"
SETTINGS_HIDE_COMPLETED = "view/hide_completed"
SETTINGS_RECENT_EXPORTS = "export/recent"
SETTINGS_OUTLINE = "outline/rows_v1"
MAX_RECENTS = 8

INDENT_PX = 24
ROW_PLACEHOLDER = "Type…  (Enter new • Tab indent • Alt+↑/↓ move)"
SHORTCUTS_HINT = "Shortcuts: Enter • Tab/Shift+Tab • Alt+↑/↓ • Backspace on empty"
