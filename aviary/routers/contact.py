"""Contact form endpoint — relays an inquiry email to the shop."""


from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from aviary.core.response import DataResponse
from aviary.dependencies import get_mailer
from aviary.schemas.contact import ContactMessage, ContactReceipt
from aviary.services.mailer import ContactMailer

router = APIRouter(prefix="/api/contact", tags=["Contact"])


@router.post("", response_model=DataResponse[ContactReceipt])
async def send_inquiry(
    body: ContactMessage,
    mailer: ContactMailer = Depends(get_mailer),
):
    await run_in_threadpool(mailer.send, body)
    return {"data": ContactReceipt()}
