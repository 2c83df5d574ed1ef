from app.models.blog import BlogDB

__all__ = ["BlogDB"]
