import os
from dotenv import load_dotenv

load_dotenv()

MONGODB_URI = os.getenv("MONGODB_URI")  # full connection string, wins over the pieces below
DB_USERS = os.getenv("DB_USERS")
DB_PASSWORD = os.getenv("DB_PASSWORD")
DB_CLUSTER = os.getenv("DB_CLUSTER", "cluster0.uteipwi.mongodb.net")
DB_NAME = os.getenv("DB_NAME", "espressoDB")
APP_NAME = os.getenv("APP_NAME", "Espresso-Emporium")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
