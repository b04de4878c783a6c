import logging
import sys

from blogcontent.repos.posts_repo import LocalFileReader
from blogcontent.services.posts_service import PostsService
from blogcontent.settings import settings

logger = logging.getLogger(__name__)


def main() -> int:
    reader = LocalFileReader()
    service = PostsService(reader=reader)
    entries = [
        name
        for name in reader.list_entries(service.directory)
        if name.endswith(service.extension)
    ]
    posts = service.load_all()
    dropped = len(entries) - len(posts)
    if dropped:
        logger.error(
            f"{dropped} of {len(entries)} posts in {settings.POSTS_DIR} are invalid"
        )
        return 1
    logger.info(f"All {len(posts)} posts in {settings.POSTS_DIR} are valid")
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    sys.exit(main())
