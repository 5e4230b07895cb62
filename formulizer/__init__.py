"""Core logic for Formulizer.

The Gradio UI lives in `app.py`. This package contains the pieces behind it:
- static reference data (return types, help content)
- flattening of nested evaluation results into table rows
- request shaping and the HTTP client for the formula service
- the form controller and the small UX helpers (copy button, about modal)
"""
