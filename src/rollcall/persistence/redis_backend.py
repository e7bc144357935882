"""Redis realtime mirror implementing IMirror."""

from __future__ import annotations

import json
import logging
import uuid

import redis

from rollcall.core.exceptions import MirrorError
from rollcall.core.protocols import ChangeCallback

logger = logging.getLogger(__name__)


class RedisMirror:
    """Remote document tree backed by Redis strings plus a pub/sub change channel.

    Every push publishes ``{"key": ..., "origin": ...}``; subscribers re-read
    the key. Notifications carrying this client's own origin are ignored.
    """

    def __init__(self, host: str = "localhost", port: int = 6379, db: int = 0,
                 key_prefix: str = "rollcall:", channel: str = "rollcall:changes") -> None:
        self._host = host
        self._port = port
        self._db = db
        self._prefix = key_prefix
        self._channel = channel
        self._origin = uuid.uuid4().hex
        self._client = redis.Redis(
            host=host, port=port, db=db, decode_responses=True,
        )
        self._pubsub = None
        self._listener = None

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    def pull(self, keys: list[str]) -> dict[str, str | None]:
        try:
            values = self._client.mget([self._key(k) for k in keys])
        except Exception as exc:
            raise MirrorError(f"Redis MGET failed for keys={keys!r}: {exc}") from exc
        return dict(zip(keys, values))

    def push(self, key: str, value: str | None) -> None:
        message = json.dumps({"key": key, "origin": self._origin})
        try:
            pipe = self._client.pipeline()
            if value is None:
                pipe.delete(self._key(key))
            else:
                pipe.set(self._key(key), value)
            pipe.publish(self._channel, message)
            pipe.execute()
        except Exception as exc:
            raise MirrorError(f"Redis push failed for key={key!r}: {exc}") from exc

    def subscribe(self, on_change: ChangeCallback) -> None:
        def _handle(message: dict) -> None:
            try:
                payload = json.loads(message["data"])
                if payload.get("origin") == self._origin:
                    return
                key = payload["key"]
                on_change(key, self._client.get(self._key(key)))
            except Exception:
                logger.exception("Failed to apply remote change from %s", self._channel)

        try:
            self._pubsub = self._client.pubsub(ignore_subscribe_messages=True)
            self._pubsub.subscribe(**{self._channel: _handle})
            self._listener = self._pubsub.run_in_thread(sleep_time=0.1, daemon=True)
        except Exception as exc:
            raise MirrorError(f"Redis SUBSCRIBE failed for channel={self._channel!r}: {exc}") from exc

    def close(self) -> None:
        if self._listener is not None:
            self._listener.stop()
            self._listener = None
        if self._pubsub is not None:
            self._pubsub.close()
            self._pubsub = None
        self._client.close()
