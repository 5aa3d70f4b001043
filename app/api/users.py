"""
User data erasure API endpoints
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from app.database import get_db
from app.schemas.review import DeleteResponse
from app.services.progress_service import progress_service
from app.services.review_service import review_service

router = APIRouter(prefix="/api/users", tags=["users"])
logger = logging.getLogger(__name__)


@router.delete("/{user_id}", response_model=DeleteResponse)
def delete_user_data(user_id: str, db: Session = Depends(get_db)):
    """
    Erase everything stored for a user

    Removes both the review list and the solved-question records.
    """
    wrong_deleted = review_service.purge_user(db, user_id)
    solved_deleted = progress_service.purge_user(db, user_id)

    logger.info(
        f"User data erased: user={user_id}, wrong_answers={wrong_deleted}, "
        f"solved={solved_deleted}"
    )

    return DeleteResponse(
        message="User data deleted",
        deleted_count=wrong_deleted + solved_deleted
    )
