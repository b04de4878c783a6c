from blogcontent.services.posts_service import PostsService, get_default_service


def get_posts_service() -> PostsService:
    """Process-wide posts service; override in tests."""
    return get_default_service()
