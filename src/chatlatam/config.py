from pathlib import Path
import os

PACKAGE_ROOT = Path(__file__).resolve().parent
DATA_DIR = PACKAGE_ROOT.parent.parent / "data"

DATA_FILE = Path(os.environ.get("CHATLATAM_DATA_FILE", DATA_DIR / "BD.txt"))
DATA_ENCODING = os.environ.get("CHATLATAM_DATA_ENCODING", "utf-8-sig")

DB_PATH = Path(os.environ.get("CHATLATAM_DB_PATH", DATA_DIR / "capitales_latinoamerica.sqlite"))
DB_SCRIPT = DATA_DIR / "capitales.sql"
TABLE_NAME = "Capitales"

API_KEY = os.environ.get("OPENAI_API_KEY")
LLM_MODEL = os.environ.get("CHATLATAM_LLM_MODEL", "gpt-3.5-turbo")
SYSTEM_PERSONA = "Eres un experto en geografia de Latinoamerica."
