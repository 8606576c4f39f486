"""Projects service."""

from job_vault.db.tables import Project
from job_vault.services.professional_history import HistoryEntityService


class ProjectService(HistoryEntityService):
    """Projects in the caller's history, most recently added first."""

    model = Project
    label = "PROJECT"
    entity_name = "Project"
    order_by = (Project.created_at.desc(),)
