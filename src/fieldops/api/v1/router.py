from fastapi import APIRouter

from src.fieldops.api.v1 import (
    attachments,
    auth,
    customers,
    job_statuses,
    jobs,
    realtime,
    signatures,
    tasks,
    users,
)

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(customers.router)
api_router.include_router(job_statuses.router)
api_router.include_router(jobs.router)
api_router.include_router(tasks.router)
api_router.include_router(attachments.router)
api_router.include_router(signatures.router)
api_router.include_router(realtime.router)
