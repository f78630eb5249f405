import logging


logger = logging.getLogger(__name__)

MANAGER_COLUMNS = "id, name, department, sport, contact, email, studentCount, teamId, createdAt, updatedAt"


class ManagerDbMixin:
    """Manager queries.

    Every method runs on a dictionary cursor borrowed by the caller, so a
    request touches exactly one pooled connection.
    """

    # ==================== Managers ====================

    def fetch_managers(self, cursor):
        cursor.execute(f"SELECT {MANAGER_COLUMNS} FROM managers ORDER BY createdAt DESC")
        return cursor.fetchall()

    def count_managers(self, cursor):
        cursor.execute("SELECT COUNT(*) AS count FROM managers")
        row = cursor.fetchone() or {}
        return int(row.get('count') or 0)

    def fetch_manager(self, cursor, manager_id):
        cursor.execute(f"SELECT {MANAGER_COLUMNS} FROM managers WHERE id = %s", (manager_id,))
        return cursor.fetchone()

    def fetch_manager_by_email(self, cursor, email):
        cursor.execute(f"SELECT {MANAGER_COLUMNS} FROM managers WHERE email = %s", (email,))
        return cursor.fetchone()

    def fetch_manager_by_credentials(self, cursor, email, contact):
        """Login lookup: the contact number doubles as the password"""
        cursor.execute(
            f"SELECT {MANAGER_COLUMNS} FROM managers WHERE email = %s AND contact = %s",
            (email, contact),
        )
        return cursor.fetchone()

    def manager_exists(self, cursor, manager_id):
        cursor.execute("SELECT id FROM managers WHERE id = %s", (manager_id,))
        return cursor.fetchone() is not None

    def manager_email_taken(self, cursor, email, exclude_id=None):
        if exclude_id is None:
            cursor.execute("SELECT id FROM managers WHERE email = %s", (email,))
        else:
            cursor.execute("SELECT id FROM managers WHERE email = %s AND id != %s", (email, exclude_id))
        return cursor.fetchone() is not None

    def insert_manager(self, cursor, manager):
        cursor.execute(
            """
            INSERT INTO managers (name, department, sport, contact, email, studentCount, teamId)
            VALUES (%s, %s, %s, %s, %s, %s, %s)
            """,
            (
                manager['name'],
                manager['department'],
                manager['sport'],
                manager['contact'],
                manager['email'],
                manager['studentCount'],
                manager.get('teamId'),
            ),
        )
        return cursor.lastrowid

    def update_manager(self, cursor, manager_id, manager):
        cursor.execute(
            """
            UPDATE managers
            SET name = %s, department = %s, sport = %s, contact = %s, email = %s, studentCount = %s, teamId = %s
            WHERE id = %s
            """,
            (
                manager['name'],
                manager['department'],
                manager['sport'],
                manager['contact'],
                manager['email'],
                manager['studentCount'],
                manager.get('teamId'),
                manager_id,
            ),
        )

    def delete_manager(self, cursor, manager_id):
        # students, coaches, selections and links go with it (ON DELETE CASCADE)
        cursor.execute("DELETE FROM managers WHERE id = %s", (manager_id,))
        logger.info("Deleted manager %s", manager_id)
