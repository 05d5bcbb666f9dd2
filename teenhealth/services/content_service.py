"""Read-only site content: pages, home page, search, services, blog
posts and health programs."""
from typing import Any, Dict, List

from teenhealth.core.errors import BadRequestError
from teenhealth.services.record_store import Collections, RecordStore, contains, eq


class ContentService:
    def __init__(self, store: RecordStore):
        self.store = store

    def page(self, page_id: str) -> Dict[str, Any]:
        return self.store.find_first(Collections.PAGES, eq("pageId", page_id), not_found="Page not found")

    def home_page_content(self) -> List[Dict[str, Any]]:
        return self.store.find(Collections.HOME_PAGE_CONTENT)

    def search(self, query: str) -> List[Dict[str, Any]]:
        """Health articles whose title or description contains ``query``."""
        query = (query or "").strip()
        if not query:
            raise BadRequestError("Search query must not be empty")
        return self.store.find(
            Collections.HEALTH_DATA,
            any_of=[contains("title", query), contains("description", query)],
        )

    def service(self, service_id: str) -> Dict[str, Any]:
        return self.store.find_first(
            Collections.SERVICES, eq("serviceId", service_id), not_found="Service not found"
        )

    def blog_posts(self) -> List[Dict[str, Any]]:
        return self.store.find(Collections.BLOG_POSTS)

    def blog_post(self, post_id: str) -> Dict[str, Any]:
        return self.store.find_first(Collections.BLOG_POSTS, eq("postId", post_id), not_found="Post not found")

    def programs(self, program_type: str) -> List[Dict[str, Any]]:
        return self.store.find(Collections.HEALTH_PROGRAMS, eq("type", program_type))
