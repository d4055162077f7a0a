"""
Submission form model and client-side validation.

The Add Recommendation page keeps a RecommendationForm in session state. Before
anything is sent to the backend the form is validated; the first failing rule
produces the inline message shown to the user and no request is made.
"""

from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, Optional, Sequence

from recommendations.models import is_valid_url

SUBMIT_ERROR_MESSAGE = "Failed to create recommendation. Please try again."
SUCCESS_MESSAGE = "Recommendation added successfully!"
CATEGORIES_ERROR_MESSAGE = "Failed to load categories"


@dataclass
class RecommendationForm:
    """Values of the submission form, as typed by the user."""
    title: str = ""
    description: str = ""
    address: str = ""
    category_id: str = ""
    website: str = ""
    image_url: str = ""

    def validate(self) -> Optional[str]:
        """
        Check the form before submission.

        Returns:
            The first validation message, or None if the form can be submitted
        """
        if not self.title.strip():
            return "Title is required"
        if not self.description.strip():
            return "Description is required"
        if not self.address.strip():
            return "Address is required"
        if not self.category_id:
            return "Category is required"
        if self.website and not is_valid_url(self.website):
            return "Invalid website URL"
        if self.image_url and not is_valid_url(self.image_url):
            return "Invalid image URL"
        return None

    def to_payload(self) -> Dict[str, Any]:
        """JSON body for POST /recommendations (camelCase keys)."""
        return {
            "title": self.title,
            "description": self.description,
            "address": self.address,
            "categoryId": self.category_id,
            "website": self.website,
            "imageUrl": self.image_url,
        }

    def as_dict(self) -> Dict[str, str]:
        return asdict(self)


def default_category_id(categories: Optional[Sequence[Dict[str, Any]]]) -> str:
    """First category id, or "" when there are no categories."""
    if not categories:
        return ""
    return str(categories[0].get("id", ""))


@dataclass
class SubmissionResult:
    """Outcome of a submit attempt."""
    ok: bool
    message: str
    sent: bool
    created: Optional[Dict[str, Any]] = None


def submit_form(
    form: RecommendationForm,
    send: Callable[[Dict[str, Any]], Optional[Dict[str, Any]]],
) -> SubmissionResult:
    """
    Validate the form and, if valid, send it.

    Args:
        form: Current form values; never modified here
        send: Callable posting the payload, returning the created recommendation
              or None on failure (see api_client.create_recommendation)

    Returns:
        SubmissionResult; sent is False when validation stopped the submit
    """
    error = form.validate()
    if error:
        return SubmissionResult(ok=False, message=error, sent=False)

    created = send(form.to_payload())
    if created is None:
        return SubmissionResult(ok=False, message=SUBMIT_ERROR_MESSAGE, sent=True)
    return SubmissionResult(ok=True, message=SUCCESS_MESSAGE, sent=True, created=created)
