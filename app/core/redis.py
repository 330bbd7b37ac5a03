# app/core/redis.py
import redis.asyncio as redis

from app.core.config import REDIS_URL

# Connections are opened lazily, so importing this never touches the network
redis_client = redis.from_url(REDIS_URL, decode_responses=True)
