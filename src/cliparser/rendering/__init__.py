from cliparser.rendering.formatters import render, render_json, render_text

__all__ = ['render', 'render_json', 'render_text']
