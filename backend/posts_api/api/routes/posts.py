"""Posts Routes — declarative dispatch of /api/posts verbs to the PostController.

Invariants:
    - No business logic: path/body extraction, then one controller call
    - Non-integer ids rejected by FastAPI path validation (→ 400)
    - Success statuses: 200 for reads/updates/deletes, 201 for create

Design Decisions:
    - Body accepted raw (JSON or form, api/dependencies.py): the controller owns
      payload validation
    - Responses built from Outcomes, not raised exceptions (api/outcomes.py)
"""

from typing import Any

from fastapi import APIRouter, Depends, status

from posts_api.api.dependencies import get_post_controller, get_post_payload
from posts_api.api.outcomes import render_outcome
from posts_api.core.domain_types import PostId
from posts_api.schemas.post import (
    DeleteResponse, PostResponse,
    serialize_deletion, serialize_post, serialize_posts,
)
from posts_api.services.post_controller import PostController

router = APIRouter(prefix="/api/posts", tags=["posts"])


@router.get("", response_model=list[PostResponse])
async def list_posts(controller: PostController = Depends(get_post_controller)):
    """List every post in creation order."""
    outcome = await controller.list_posts()
    return render_outcome(outcome, status.HTTP_200_OK, serialize_posts)


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: int, controller: PostController = Depends(get_post_controller),
):
    outcome = await controller.get_post(PostId(post_id))
    return render_outcome(outcome, status.HTTP_200_OK, serialize_post)


@router.post(
    "", response_model=PostResponse, status_code=status.HTTP_201_CREATED,
)
async def create_post(
    payload: Any = Depends(get_post_payload),
    controller: PostController = Depends(get_post_controller),
):
    """Create a post from {"title", "body"}."""
    outcome = await controller.create_post(payload)
    return render_outcome(outcome, status.HTTP_201_CREATED, serialize_post)


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: int,
    payload: Any = Depends(get_post_payload),
    controller: PostController = Depends(get_post_controller),
):
    """Merge title and/or body into an existing post."""
    outcome = await controller.update_post(PostId(post_id), payload)
    return render_outcome(outcome, status.HTTP_200_OK, serialize_post)


@router.delete("/{post_id}", response_model=DeleteResponse)
async def delete_post(
    post_id: int, controller: PostController = Depends(get_post_controller),
):
    outcome = await controller.delete_post(PostId(post_id))
    return render_outcome(outcome, status.HTTP_200_OK, serialize_deletion)
