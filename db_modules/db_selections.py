SELECTION_COLUMNS = "id, studentId, managerId, isSelected, createdAt, updatedAt"


class SelectionDbMixin:
    """Student selection flags, unique per (studentId, managerId)"""

    # ==================== Student selections ====================

    def fetch_selections(self, cursor, manager_id):
        cursor.execute(
            """
            SELECT ss.id, ss.studentId, ss.managerId, ss.isSelected, ss.createdAt, ss.updatedAt,
                   s.name AS studentName, s.prn_uid, s.contact, s.email
            FROM student_selections ss
            JOIN students s ON ss.studentId = s.id
            WHERE ss.managerId = %s
            ORDER BY ss.updatedAt DESC
            """,
            (manager_id,),
        )
        return cursor.fetchall()

    def fetch_selection(self, cursor, selection_id):
        cursor.execute(f"SELECT {SELECTION_COLUMNS} FROM student_selections WHERE id = %s", (selection_id,))
        return cursor.fetchone()

    def fetch_selection_for_pair(self, cursor, student_id, manager_id):
        cursor.execute(
            f"SELECT {SELECTION_COLUMNS} FROM student_selections WHERE studentId = %s AND managerId = %s",
            (student_id, manager_id),
        )
        return cursor.fetchone()

    def insert_selection(self, cursor, student_id, manager_id, is_selected):
        cursor.execute(
            "INSERT INTO student_selections (studentId, managerId, isSelected) VALUES (%s, %s, %s)",
            (student_id, manager_id, is_selected),
        )
        return cursor.lastrowid

    def upsert_selection(self, cursor, student_id, manager_id, is_selected):
        """Update the pair's flag if the row exists, insert it otherwise"""
        cursor.execute(
            """
            INSERT INTO student_selections (studentId, managerId, isSelected)
            VALUES (%s, %s, %s)
            ON DUPLICATE KEY UPDATE isSelected = VALUES(isSelected)
            """,
            (student_id, manager_id, is_selected),
        )

    def delete_selection(self, cursor, selection_id):
        cursor.execute("DELETE FROM student_selections WHERE id = %s", (selection_id,))
