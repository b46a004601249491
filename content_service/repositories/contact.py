from typing import List, Optional, Tuple

from content_service.models.contact_submission import ContactSubmission
from content_service.repositories.base import Repository


class ContactSubmissionRepository(Repository[ContactSubmission]):
    model = ContactSubmission

    def paged(self, page: int, page_size: int, status: Optional[str] = None) -> Tuple[List[ContactSubmission], int]:
        q = self.query()
        if status:
            q = q.filter(ContactSubmission.status == status)
        q = q.order_by(ContactSubmission.created_at.desc(), ContactSubmission.id)
        return self.paginate(q, page, page_size)

    def unread_count(self) -> int:
        return self.query().filter(ContactSubmission.is_read.is_(False)).count()
