#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
School Sports Management - JSON file record store

Small metadata collections (team gallery images) live in a JSON array on
disk instead of a table.
"""

import json
import logging
import os
import tempfile
import threading
import time

logger = logging.getLogger(__name__)


class JsonRecordStore:
    """A JSON array of records keyed by their 'id' field"""

    def __init__(self, path):
        self.path = path
        self._lock = threading.Lock()

    def _load(self):
        if not os.path.exists(self.path):
            return []
        with open(self.path, 'r', encoding='utf-8') as f:
            return json.load(f)

    def _save(self, records):
        folder = os.path.dirname(self.path) or '.'
        os.makedirs(folder, exist_ok=True)

        # write then rename so readers never see a half-written file
        fd, tmp_path = tempfile.mkstemp(dir=folder, suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(records, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def exists(self):
        return os.path.exists(self.path)

    def all(self):
        with self._lock:
            return self._load()

    def get(self, record_id):
        with self._lock:
            for record in self._load():
                if record.get('id') == record_id:
                    return record
        return None

    def add(self, record):
        """Append a record; one without an 'id' gets a unique millisecond id"""
        with self._lock:
            records = self._load()
            if record.get('id') is None:
                taken = {r.get('id') for r in records}
                stamp = int(time.time() * 1000)
                while str(stamp) in taken:
                    stamp += 1
                record = {'id': str(stamp), **record}
            records.append(record)
            self._save(records)
        return record

    def update(self, record_id, changes):
        """Merge changes into a record; returns the new record or None"""
        with self._lock:
            records = self._load()
            for index, record in enumerate(records):
                if record.get('id') == record_id:
                    record = dict(record)
                    record.update(changes)
                    records[index] = record
                    self._save(records)
                    return record
        return None

    def remove(self, record_id):
        """Delete a record; returns the removed record or None"""
        with self._lock:
            records = self._load()
            for index, record in enumerate(records):
                if record.get('id') == record_id:
                    removed = records.pop(index)
                    self._save(records)
                    logger.info("Removed record %s from %s", record_id, os.path.basename(self.path))
                    return removed
        return None
