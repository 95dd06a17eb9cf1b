"""In-memory application state owned by the app shell.

Holds the current candidate profile, saved jobs and tracked applications.
The scoring engines never read this object; handlers pass the profile in.
"""

import logging
import threading
import uuid
from datetime import datetime, timezone

from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_posting import JobPosting
from models.schemas.tracking import ApplicationStatus, JobApplication, SavedJob

logger = logging.getLogger(__name__)


class ApplicationNotFoundError(KeyError):
    """Raised when an application id is not tracked."""


def _now() -> datetime:
    return datetime.now(timezone.utc)


class AppState:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._profile: CandidateProfile | None = None
        self._saved_jobs: list[SavedJob] = []
        self._applications: list[JobApplication] = []

    # --- Profile ---

    def get_profile(self) -> CandidateProfile | None:
        return self._profile

    def set_profile(self, profile: CandidateProfile) -> CandidateProfile:
        with self._lock:
            self._profile = profile
        logger.info("Profile set (%d skills, %d interests)", len(profile.skills), len(profile.interests))
        return profile

    def update_profile(self, **fields) -> CandidateProfile:
        """Merge fields into the current profile, creating one if needed.

        Raises ValueError for names that are not profile fields.
        """
        unknown = sorted(set(fields) - set(CandidateProfile.model_fields))
        if unknown:
            raise ValueError(f"Unknown profile field(s): {', '.join(unknown)}")
        with self._lock:
            base = self._profile.model_dump() if self._profile else {}
            base.update(fields)
            self._profile = CandidateProfile(**base)
            return self._profile

    def clear_profile(self) -> None:
        with self._lock:
            self._profile = None

    # --- Saved jobs ---

    @property
    def saved_jobs(self) -> list[SavedJob]:
        return list(self._saved_jobs)

    def save_job(self, job: JobPosting, match: int | None = None) -> SavedJob:
        """Save a job once; saving an already-saved id returns the existing entry."""
        with self._lock:
            for saved in self._saved_jobs:
                if saved.id == job.id:
                    return saved
            saved = SavedJob(**job.model_dump(), saved_at=_now(), match=match)
            self._saved_jobs.append(saved)
        logger.info("Saved job %s (%s)", job.id, job.title)
        return saved

    def unsave_job(self, job_id: str) -> None:
        with self._lock:
            self._saved_jobs = [j for j in self._saved_jobs if j.id != job_id]

    def is_job_saved(self, job_id: str) -> bool:
        return any(j.id == job_id for j in self._saved_jobs)

    def clear_saved_jobs(self) -> None:
        with self._lock:
            self._saved_jobs = []

    # --- Applications ---

    @property
    def applications(self) -> list[JobApplication]:
        return list(self._applications)

    def add_application(
        self,
        job_id: str,
        title: str = "",
        company: str = "",
        location: str = "",
        salary: str = "",
        status: ApplicationStatus = "applied",
        notes: str = "",
        url: str | None = None,
    ) -> JobApplication:
        now = _now()
        application = JobApplication(
            id=f"app-{uuid.uuid4().hex[:12]}",
            job_id=job_id,
            title=title,
            company=company,
            location=location,
            salary=salary,
            status=status,
            applied_at=now,
            updated_at=now,
            notes=notes,
            url=url,
        )
        with self._lock:
            self._applications.append(application)
        logger.info("Tracking application %s for job %s", application.id, job_id)
        return application

    def _replace(self, app_id: str, **changes) -> JobApplication:
        with self._lock:
            for i, app in enumerate(self._applications):
                if app.id == app_id:
                    updated = app.model_copy(update={**changes, "updated_at": _now()})
                    self._applications[i] = updated
                    return updated
        raise ApplicationNotFoundError(app_id)

    def update_application_status(self, app_id: str, status: ApplicationStatus) -> JobApplication:
        updated = self._replace(app_id, status=status)
        logger.info("Application %s moved to %s", app_id, status)
        return updated

    def update_application_notes(self, app_id: str, notes: str) -> JobApplication:
        return self._replace(app_id, notes=notes)

    def remove_application(self, app_id: str) -> None:
        with self._lock:
            remaining = [a for a in self._applications if a.id != app_id]
            if len(remaining) == len(self._applications):
                raise ApplicationNotFoundError(app_id)
            self._applications = remaining

    def get_application_by_job_id(self, job_id: str) -> JobApplication | None:
        return next((a for a in self._applications if a.job_id == job_id), None)

    def clear_applications(self) -> None:
        with self._lock:
            self._applications = []
