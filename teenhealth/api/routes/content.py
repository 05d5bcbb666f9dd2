"""Public site content: pages, home page, search, services, blog, programs."""
from fastapi import APIRouter, Depends, Query

from teenhealth.api.deps import get_content_service
from teenhealth.services.content_service import ContentService

router = APIRouter(tags=["content"])


@router.get("/pages/{page_id}")
def fetch_page_data(page_id: str, content: ContentService = Depends(get_content_service)):
    return {"page": content.page(page_id)}


@router.get("/home")
def fetch_home_page_content(content: ContentService = Depends(get_content_service)):
    return {"content": content.home_page_content()}


@router.get("/search")
def get_search_results(
    q: str = Query(..., description="Matched against article title and description"),
    content: ContentService = Depends(get_content_service),
):
    return {"results": content.search(q)}


@router.get("/services/{service_id}")
def fetch_service_details(service_id: str, content: ContentService = Depends(get_content_service)):
    return {"service": content.service(service_id)}


@router.get("/blog/posts")
def fetch_blog_posts(content: ContentService = Depends(get_content_service)):
    return {"posts": content.blog_posts()}


@router.get("/blog/posts/{post_id}")
def fetch_blog_post(post_id: str, content: ContentService = Depends(get_content_service)):
    return {"post": content.blog_post(post_id)}


@router.get("/programs/visitor")
def get_visitor_program_data(content: ContentService = Depends(get_content_service)):
    return {"programs": content.programs("visitor")}


@router.get("/programs/participant")
def get_participant_program_data(content: ContentService = Depends(get_content_service)):
    return {"programs": content.programs("participant")}
