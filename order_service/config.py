"""
Service configuration read from the environment
"""
import os

HOST = os.getenv('HOST', 'localhost')
PORT = int(os.getenv('PORT', '8081'))
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

# 400 reports a malformed body as a client error; 500 keeps the old behaviour
DECODE_ERROR_STATUS = int(os.getenv('DECODE_ERROR_STATUS', '400'))
if DECODE_ERROR_STATUS not in (400, 500):
    raise ValueError(f"DECODE_ERROR_STATUS must be 400 or 500, got {DECODE_ERROR_STATUS}")
