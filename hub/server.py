from __future__ import annotations

import asyncio
import json
import logging
import random
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Dict, Optional

import websockets
from websockets.exceptions import ConnectionClosed

from cardgame.errors import CardGameError
from cardgame.holdem import HoldemGame
from cardgame.models import HoldemConfig

if TYPE_CHECKING:
    from websockets.asyncio.server import ServerConnection

LOGGER = logging.getLogger("holdem_hub")

# HubServer plays showdown-only rounds on request and broadcasts the result to
# every joined client. All card handling stays in cardgame; this module only
# deals with sockets and JSON envelopes.


@dataclass
class ClientSession:
    name: str
    websocket: "ServerConnection"


class HubServer:
    def __init__(self, config: HoldemConfig) -> None:
        self.config = config
        self.sessions: Dict[Any, ClientSession] = {}
        self.lock = asyncio.Lock()
        # One long-lived generator per hub; each round gets its own seed from it.
        self.rng = random.Random(config.seed)
        self.rounds_played = 0

    async def start(self, host: str = "0.0.0.0", port: int = 8765) -> None:
        async with websockets.serve(self._handle_connection, host, port):
            LOGGER.info("Hub listening on %s:%s", host, port)
            await asyncio.Future()

    async def _handle_connection(self, websocket: "ServerConnection") -> None:
        try:
            async for raw in websocket:
                message = self._decode(raw)
                if message is None:
                    await self._send_error(websocket, code="BAD_JSON", msg="Message is not a JSON object")
                    continue
                await self._handle_message(websocket, message)
        except ConnectionClosed:
            pass
        finally:
            await self._unregister(websocket)

    async def _handle_message(self, websocket: "ServerConnection", message: Dict[str, object]) -> None:
        msg_type = message.get("type")
        if msg_type == "join_game":
            await self._handle_join(websocket, message)
        elif msg_type == "deal_hand":
            await self._handle_deal(websocket, message)
        elif msg_type == "player_action":
            await self._send_error(websocket, code="NOT_SUPPORTED", msg="Betting is not part of this table")
        else:
            LOGGER.warning("Unknown message type: %s", msg_type)
            await self._send_error(websocket, code="UNKNOWN_TYPE", msg="Unsupported message type")

    async def _handle_join(self, websocket: "ServerConnection", message: Dict[str, object]) -> None:
        name_raw = message.get("name")
        name = name_raw.strip() if isinstance(name_raw, str) else ""
        if not name:
            await self._send_error(websocket, code="BAD_SCHEMA", msg="name required")
            return

        async with self.lock:
            self.sessions[websocket] = ClientSession(name=name, websocket=websocket)
            clients = len(self.sessions)
        LOGGER.info("Client %s joined (%s connected)", name, clients)

        await self._send_json(websocket, "welcome", {
            "name": name,
            "clients": clients,
            "config": {
                "players": self.config.players,
                "hole_cards": self.config.hole_cards,
                "community_cards": self.config.community_cards,
                "tie_policy": self.config.tie_policy.value,
            },
        })

    async def _handle_deal(self, websocket: "ServerConnection", message: Dict[str, object]) -> None:
        if websocket not in self.sessions:
            await self._send_error(websocket, code="NOT_JOINED", msg="join_game first")
            return

        players = message.get("players", self.config.players)
        seed = message.get("seed")
        if not _is_int(players) or (seed is not None and not _is_int(seed)):
            await self._send_error(websocket, code="BAD_SCHEMA", msg="players and seed must be integers")
            return

        async with self.lock:
            if seed is None:
                seed = self.rng.getrandbits(32)
            try:
                config = replace(self.config, players=players, seed=seed)
            except ValueError as exc:
                await self._send_error(websocket, code="BAD_SCHEMA", msg=str(exc))
                return
            game = HoldemGame(config)
            try:
                game.play_round()
            except CardGameError as exc:
                LOGGER.warning("Round failed seed=%s reason=%s", seed, exc)
                await self._send_error(websocket, code=exc.code, msg=str(exc))
                return
            self.rounds_played += 1
            payload = {"round": self.rounds_played, "seed": seed, **game.showdown_payload()}

        LOGGER.info(
            "Round %s seed=%s winners=%s split=%s",
            payload["round"],
            seed,
            payload["winners"],
            payload["split"],
        )
        await self._broadcast("showdown", payload)

    async def _unregister(self, websocket: "ServerConnection") -> None:
        async with self.lock:
            session = self.sessions.pop(websocket, None)
        if session:
            LOGGER.info("Client %s disconnected", session.name)

    async def _broadcast(self, msg_type: str, payload: Dict[str, object]) -> None:
        async with self.lock:
            targets = [session.websocket for session in self.sessions.values()]
        if not targets:
            return
        message = self._envelope(msg_type, payload)
        await asyncio.gather(*(socket.send(message) for socket in targets), return_exceptions=True)

    async def _send_json(self, websocket: "ServerConnection", msg_type: str, payload: Dict[str, object]) -> None:
        try:
            await websocket.send(self._envelope(msg_type, payload))
        except ConnectionClosed:
            pass

    async def _send_error(self, websocket: "ServerConnection", code: str, msg: str) -> None:
        await self._send_json(websocket, "error", {"code": code, "msg": msg})

    def _envelope(self, msg_type: str, payload: Dict[str, object]) -> str:
        body = {"type": msg_type, "v": 1, "ts": datetime.now(timezone.utc).isoformat()}
        body.update(payload)
        return json.dumps(body)

    def _decode(self, raw: Any) -> Optional[Dict[str, object]]:
        try:
            message = json.loads(raw)
        except (TypeError, ValueError):
            return None
        if not isinstance(message, dict):
            return None
        return message


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
