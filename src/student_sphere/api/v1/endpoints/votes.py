"""Vote-related endpoints for the Student Sphere API."""

from fastapi import APIRouter, status

from student_sphere.api.v1.dependencies import CurrentUserDep, SessionDep
from student_sphere.schemas.vote import VoteCreate, VoteResponse
from student_sphere.services.posts import as_target
from student_sphere.services.votes import cast_vote as cast_vote_service

router = APIRouter(prefix="/votes", tags=["votes"])


@router.post("", response_model=VoteResponse, status_code=status.HTTP_200_OK)
async def cast_vote(
    vote_data: VoteCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> VoteResponse:
    """Upvote a post or comment; voting again removes the upvote."""
    target = as_target(vote_data.post_id, vote_data.comment_id)
    result = cast_vote_service(db, current_user, target, vote_data.value)
    return VoteResponse(vote=result.vote, vote_score=result.vote_score)
