import os
from dotenv import load_dotenv


# MongoDB settings
load_dotenv()
MONGO_URI = os.getenv('MONGO_URI', 'mongodb://localhost:27017')
MONGO_DB_NAME = os.getenv('MONGO_DB_NAME')

# Timeouts
CONNECT_TIMEOUT_SECONDS = float(os.getenv('CONNECT_TIMEOUT_SECONDS', 20))
COUNT_MAX_TIME_SECONDS = float(os.getenv('COUNT_MAX_TIME_SECONDS', 2))

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
