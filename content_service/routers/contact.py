import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from content_service.models.base import get_db
from content_service.models.contact_submission import CONTACT_STATUSES, ContactSubmission
from content_service.repositories.contact import ContactSubmissionRepository
from content_service.schemas.common import ApiResponse, PagedResponse, ok, paged
from content_service.schemas.contact import ContactStatusUpdate, ContactSubmissionIn, ContactSubmissionOut

router = APIRouter()
logger = logging.getLogger(__name__)


def _to_out(c: ContactSubmission) -> ContactSubmissionOut:
    return ContactSubmissionOut(
        id=c.id,
        name=c.name,
        email=c.email,
        phone=c.phone,
        inquiryType=c.inquiry_type,
        message=c.message,
        status=c.status,
        adminNotes=c.admin_notes,
        isRead=c.is_read,
        createdAt=c.created_at,
        updatedAt=c.updated_at,
    )


def _get_or_404(repo: ContactSubmissionRepository, id: UUID) -> ContactSubmission:
    submission = repo.get(id)
    if not submission:
        raise HTTPException(status_code=404, detail="Contact submission not found")
    return submission


@router.post("", response_model=ApiResponse[ContactSubmissionOut], status_code=status.HTTP_201_CREATED)
def submit_contact(payload: ContactSubmissionIn, db: Session = Depends(get_db)):
    repo = ContactSubmissionRepository(db)
    submission = ContactSubmission(
        name=payload.name.strip(),
        email=str(payload.email).lower(),
        phone=payload.phone,
        inquiry_type=payload.inquiryType,
        message=payload.message,
        status="new",
        is_read=False,
    )
    repo.add(submission)
    repo.save()
    repo.refresh(submission)
    logger.info("Contact submission %s received (%s)", submission.id, submission.inquiry_type)
    return ok(
        _to_out(submission),
        "Your message has been submitted successfully. We will get back to you soon!",
    )


@router.get("", response_model=PagedResponse[ContactSubmissionOut])
def get_contact_submissions(
    page: int = Query(1, ge=1),
    pageSize: int = Query(20, ge=1, le=100),
    status: Optional[str] = None,
    db: Session = Depends(get_db),
):
    items, total = ContactSubmissionRepository(db).paged(page, pageSize, status.lower() if status else None)
    return paged([_to_out(c) for c in items], page, pageSize, total)


@router.get("/unread-count", response_model=ApiResponse[int])
def get_unread_count(db: Session = Depends(get_db)):
    return ok(ContactSubmissionRepository(db).unread_count())


@router.get("/status/{status}", response_model=PagedResponse[ContactSubmissionOut])
def get_contact_submissions_by_status(
    status: str,
    page: int = Query(1, ge=1),
    pageSize: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
):
    status = status.lower()
    if status not in CONTACT_STATUSES:
        raise HTTPException(status_code=400, detail=f"Status must be one of: {', '.join(CONTACT_STATUSES)}")
    items, total = ContactSubmissionRepository(db).paged(page, pageSize, status)
    return paged([_to_out(c) for c in items], page, pageSize, total)


@router.get("/{id}", response_model=ApiResponse[ContactSubmissionOut])
def get_contact_submission(id: UUID, db: Session = Depends(get_db)):
    return ok(_to_out(_get_or_404(ContactSubmissionRepository(db), id)))


@router.patch("/{id}/status", response_model=ApiResponse[ContactSubmissionOut])
def update_contact_status(id: UUID, payload: ContactStatusUpdate, db: Session = Depends(get_db)):
    repo = ContactSubmissionRepository(db)
    submission = _get_or_404(repo, id)
    submission.status = payload.status
    if payload.status != "new":
        submission.is_read = True
    if payload.adminNotes is not None:
        submission.admin_notes = payload.adminNotes
    repo.update(submission)
    repo.save()
    repo.refresh(submission)
    logger.info("Contact submission %s marked %s", id, payload.status)
    return ok(_to_out(submission), "Contact status updated successfully")


@router.delete("/{id}", response_model=ApiResponse[bool])
def delete_contact_submission(id: UUID, db: Session = Depends(get_db)):
    repo = ContactSubmissionRepository(db)
    submission = _get_or_404(repo, id)
    repo.delete(submission)
    repo.save()
    logger.info("Deleted contact submission %s", id)
    return ok(True, "Contact submission deleted successfully")
