"""
Smoke test: POST /api/tts against a running server and save the MP3.

    uvicorn src.main:app --port 5000
    python test.py
"""

import sys

import requests

BASE = "http://127.0.0.1:5000"

r = requests.get(f"{BASE}/api/health", timeout=10)
print(f"health:  {r.status_code} {r.json()}")

r = requests.post(f"{BASE}/api/tts", json={"text": "Hello world", "voice": "nova"}, timeout=30)
print(f"status:  {r.status_code}")

if r.status_code != 200:
    print(r.text)
    sys.exit(1)

print(f"type:    {r.headers.get('Content-Type')}")
print(f"length:  {r.headers.get('Content-Length')} declared, {len(r.content):,} received")

with open("tts-audio.mp3", "wb") as f:
    f.write(r.content)
print("mp3:     saved to tts-audio.mp3")
