#!/usr/bin/env uv run
# /// script
# requires-python = ">=3.9"
# dependencies = [
#     "easyfetch",
# ]
#
# [tool.uv.sources]
# easyfetch = { path = "../", editable = true }
# ///

import logging
import tempfile

from easyfetch import Client

logging.basicConfig(level=logging.DEBUG)

client = Client(
    config={
        "cache_dir": tempfile.mkdtemp(prefix="easyfetch-"),
        "cache_expire_seconds": 60,
    }
)
client.set_header("Accept", ["text/html", "*/*;q=0.8"])


def fetch_and_print(url: str):
    client.uri = url
    print(f"\n➡ Sending request to {url}...")
    response = client.request("GET")

    print(f"🚀 Status: {response.status_code} {response.reason}")
    print(f"🔄 Redirects followed: {client.redirections}")
    print(f"📍 Final URI: {client.uri}")
    print(f"📦 Body: {len(response.content)} bytes")


if __name__ == "__main__":
    url = "http://example.com/"
    fetch_and_print(url)
    fetch_and_print(url)
