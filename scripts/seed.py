#!/usr/bin/env python3
"""Provision the Dean config singleton.

Creates the tables if needed and writes the Dean's master key, security
question/answer and backup code. Re-running replaces the secrets and, with
--clear-sessions, deactivates every existing session.

Usage:
    # Using environment variables:
    DEAN_MASTER_KEY=... DEAN_SECURITY_ANSWER=... python scripts/seed.py

    # Or with command line args:
    python scripts/seed.py --master-key ... --question "..." --answer ... --backup-code ...

Environment Variables:
    DEAN_MASTER_KEY: Master key for the Dean (min 8 chars)
    DEAN_SECURITY_QUESTION: Recovery question shown on the login screen
    DEAN_SECURITY_ANSWER: Answer to the recovery question
    DEAN_BACKUP_CODE: Backup code (generated when omitted)
"""

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

# Add project root to path for imports
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

logger = logging.getLogger("seed")


async def seed(
    master_key: str,
    question: str,
    answer: str,
    backup_code: str,
    clear_sessions: bool = False,
) -> dict:
    """Create or replace the DeanConfig row.

    Returns:
        dict with status ('created' or 'updated') and key_version
    """
    from sqlmodel import SQLModel, update

    from src.app.services.credential_hasher import hash_secret, normalize_answer
    from src.depends import AsyncSessionLocal, engine
    from src.domain.base import utcnow
    from src.domain.entities import AdminSession, DeanConfig, DeanSession
    from src.adapter.repositories.dean_config_repository import DeanConfigRepository

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async with AsyncSessionLocal() as session:
        repository = DeanConfigRepository(session)
        config = await repository.get()
        now = utcnow()

        if config is None:
            config = DeanConfig(
                master_key_hash=hash_secret(master_key),
                security_question=question,
                security_answer_hash=hash_secret(normalize_answer(answer)),
                backup_code_hash=hash_secret(backup_code.strip()),
                last_changed=now,
            )
            status = "created"
        else:
            config.master_key_hash = hash_secret(master_key)
            config.security_question = question
            config.security_answer_hash = hash_secret(normalize_answer(answer))
            config.backup_code_hash = hash_secret(backup_code.strip())
            config.key_version += 1
            config.last_changed = now
            status = "updated"

        await repository.save(config)

        if clear_sessions:
            for model in (AdminSession, DeanSession):
                await session.execute(
                    update(model)
                    .where(model.is_active == True)
                    .values(is_active=False, revoked_at=now)
                )

        await session.commit()

    await engine.dispose()
    return {"status": status, "key_version": config.key_version}


def main() -> int:
    from config import ApplicationConfig
    from src.app.use_cases.dean import generate_backup_code

    parser = argparse.ArgumentParser(description="Provision the Dean config")
    parser.add_argument("--master-key", default=os.environ.get("DEAN_MASTER_KEY"))
    parser.add_argument(
        "--question",
        default=os.environ.get("DEAN_SECURITY_QUESTION", "What is the default year?"),
    )
    parser.add_argument("--answer", default=os.environ.get("DEAN_SECURITY_ANSWER"))
    parser.add_argument("--backup-code", default=os.environ.get("DEAN_BACKUP_CODE"))
    parser.add_argument(
        "--clear-sessions",
        action="store_true",
        help="Deactivate all admin and Dean sessions",
    )
    args = parser.parse_args()

    logging.basicConfig(level=ApplicationConfig.LOG_LEVEL)

    if not args.master_key or len(args.master_key) < ApplicationConfig.MASTER_KEY_MIN_LENGTH:
        parser.error(
            f"--master-key is required (min {ApplicationConfig.MASTER_KEY_MIN_LENGTH} chars)"
        )
    if not args.answer:
        parser.error("--answer is required")

    backup_code = args.backup_code or generate_backup_code()

    result = asyncio.run(
        seed(args.master_key, args.question, args.answer, backup_code, args.clear_sessions)
    )
    logger.info("Dean config %s (key version %s)", result["status"], result["key_version"])
    if not args.backup_code:
        print(f"Backup code: {backup_code}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
