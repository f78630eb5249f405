import logging
import secrets


logger = logging.getLogger(__name__)

LINK_COLUMNS = "id, managerId, token, isActive, createdAt, updatedAt"

# 24 random bytes, 48 hex characters
TOKEN_BYTES = 24


class StudentLinkDbMixin:
    """Public registration links.

    A link's token lets anyone holding it register one student under the
    owning manager, for as long as the link stays active.
    """

    # ==================== Student links ====================

    def fetch_student_links(self, cursor, manager_id=None):
        query = f"SELECT {LINK_COLUMNS} FROM student_links"
        params = []

        if manager_id:
            query += " WHERE managerId = %s"
            params.append(manager_id)

        query += " ORDER BY createdAt DESC"
        cursor.execute(query, tuple(params))
        return cursor.fetchall()

    def fetch_student_link(self, cursor, link_id):
        cursor.execute(f"SELECT {LINK_COLUMNS} FROM student_links WHERE id = %s", (link_id,))
        return cursor.fetchone()

    def fetch_active_link_by_token(self, cursor, token):
        """Link plus the owning manager's public details; None when unknown or inactive"""
        cursor.execute(
            """
            SELECT sl.id, sl.managerId, sl.token, sl.isActive, sl.createdAt, sl.updatedAt,
                   m.name AS managerName, m.department, m.sport
            FROM student_links sl
            JOIN managers m ON sl.managerId = m.id
            WHERE sl.token = %s AND sl.isActive = TRUE
            """,
            (token,),
        )
        return cursor.fetchone()

    def link_token_exists(self, cursor, token):
        cursor.execute("SELECT id FROM student_links WHERE token = %s", (token,))
        return cursor.fetchone() is not None

    def generate_link_token(self, cursor):
        token = secrets.token_hex(TOKEN_BYTES)
        while self.link_token_exists(cursor, token):
            logger.warning("Student link token collision, drawing again")
            token = secrets.token_hex(TOKEN_BYTES)
        return token

    def insert_student_link(self, cursor, manager_id, token):
        cursor.execute(
            "INSERT INTO student_links (managerId, token, isActive) VALUES (%s, %s, TRUE)",
            (manager_id, token),
        )
        return cursor.lastrowid

    def set_student_link_active(self, cursor, link_id, is_active):
        cursor.execute("UPDATE student_links SET isActive = %s WHERE id = %s", (is_active, link_id))

    def delete_student_link(self, cursor, link_id):
        cursor.execute("DELETE FROM student_links WHERE id = %s", (link_id,))
