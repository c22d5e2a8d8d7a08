"""Customer access gateway - anonymous read-only view of one job.

The customer access token is the only credential: no tenant or role check
runs here. The token is never echoed back, never expires and is never
regenerated; deleting the job is the only way to cut off access.
"""

from src.fieldops.core.exceptions import NotFound
from src.fieldops.repositories import JobRepository, TaskRepository
from src.fieldops.schemas.job import CustomerJobView
from src.fieldops.schemas.task import TaskRead


class CustomerAccessService:
    def __init__(self, job_repo: JobRepository, task_repo: TaskRepository):
        self.job_repo = job_repo
        self.task_repo = task_repo

    async def resolve(self, token: str) -> CustomerJobView:
        view = await self.job_repo.get_view_by_token(token)
        if view is None:
            raise NotFound("Job not found")

        tasks = await self.task_repo.list_for_job(view.job.tenant_id, view.job.id)
        return CustomerJobView.from_view(view, tasks=[TaskRead.model_validate(t) for t in tasks])
