"""FastAPI routers acting as controllers in the MVC architecture."""

from . import models, rules, summarize, translate

__all__ = ["models", "rules", "summarize", "translate"]
