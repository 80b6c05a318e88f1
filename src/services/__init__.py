"""
Application services layer (use cases).

- display: Writes results into the document's output regions
- binder: Guarded event listener attachment
- form_handlers: Route table and submission handlers

Services depend on the document ports from core/, never on a concrete document.
"""
