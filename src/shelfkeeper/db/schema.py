# ABOUTME: SQL DDL statements for the Shelfkeeper storage file.
# ABOUTME: One row per named collection, each holding a JSON snapshot.

SCHEMA_V1 = """
-- Named snapshots ("books", "loans"), each a JSON array
CREATE TABLE collections (
    name          TEXT PRIMARY KEY,
    payload       TEXT NOT NULL,
    date_modified TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

-- Schema versioning for future migrations
CREATE TABLE schema_version (
    version    INTEGER NOT NULL,
    applied_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

INSERT INTO schema_version (version) VALUES (1);
"""
