from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from dotenv import load_dotenv

from admission.routes import router as aps_router
from admission.ai.advisor import advisor

load_dotenv()

logging.basicConfig(level=logging.INFO)
logging.info("App starting")

app = FastAPI(title="Matric APS Advisor API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(aps_router)


@app.get("/", tags=["meta"], summary="Service info")
def root():
    return {"status": "ok", "advisor_configured": advisor.is_configured}
