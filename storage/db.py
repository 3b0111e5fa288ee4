#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging
import sqlite3

logger = logging.getLogger(__name__)


class Database:
    def __init__(self, db_path: str = "lilypad.db"):
        self.db_path = db_path
        self.conn = sqlite3.connect(self.db_path)
        self.conn.row_factory = sqlite3.Row

    def init_schema(self):
        cur = self.conn.cursor()

        # single key/value table; the habit list lives under one key
        cur.execute("""
            CREATE TABLE IF NOT EXISTS app_state (
                key TEXT PRIMARY KEY,
                value TEXT
            );
        """)

        self.conn.commit()
        logger.debug("Schema ready at %s", self.db_path)

    def close(self):
        try:
            self.conn.close()
        except sqlite3.Error:
            logger.warning("Failed to close database %s", self.db_path, exc_info=True)
