"""
Read player data from a running MTA server.
Set MTA_HOST / MTA_PORT / MTA_USER / MTA_PASSWORD, then: python examples/scoreboard.py
The server-side resource "scoreboard" must export getPlayers and getPlayerScore over HTTP.
"""
import asyncio
import logging

from mtasa import Client, load_config_from_env


class Scoreboard:
    async def getPlayers(self) -> list[str]: ...
    async def getPlayerScore(self, name: str) -> int: ...


class Resources:
    scoreboard: Scoreboard


async def main() -> None:
    mta: Client[Resources] = Client.from_config(load_config_from_env())
    players = await mta.resources.scoreboard.getPlayers()
    for name in players or []:
        score = await mta.call("scoreboard", "getPlayerScore", name)
        print(f"{name}: {score}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    asyncio.run(main())
