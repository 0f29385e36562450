"""
C Lab API Router.

Endpoints for:
- Simulated compile-and-run of C programs
- Extracting C source from a photo of code
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, Field

from bca_assistant.api.dependencies import get_study_service
from bca_assistant.study import StudyService

router = APIRouter()


class RunRequest(BaseModel):
    source: str = Field(..., description="C source code")
    stdin: str = Field("", description="Standard input fed to the program")


class LabResponse(BaseModel):
    output: str


@router.post("/run", response_model=LabResponse)
def run_program(request: RunRequest, service: StudyService = Depends(get_study_service)):
    """Simulate compiling and running a C program."""
    output = service.run_code(request.source, request.stdin)
    if output is None:
        raise HTTPException(status_code=409, detail="Superseded by a newer run")
    return LabResponse(output=output)


@router.post("/scan", response_model=LabResponse)
async def scan_image(
    file: UploadFile = File(...),
    service: StudyService = Depends(get_study_service),
):
    """Extract C source from an uploaded image."""
    image = await file.read()
    code = await run_in_threadpool(service.scan_code, image, file.content_type or "")
    if code is None:
        raise HTTPException(status_code=409, detail="Superseded by a newer scan")
    return LabResponse(output=code)
