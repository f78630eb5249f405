COACH_COLUMNS = "id, name, contact, email, specialization, managerId, createdAt, updatedAt"


class CoachDbMixin:
    # ==================== Coaches ====================

    def fetch_coaches(self, cursor, manager_id=None):
        query = f"SELECT {COACH_COLUMNS} FROM coaches"
        params = []

        if manager_id:
            query += " WHERE managerId = %s"
            params.append(manager_id)

        query += " ORDER BY createdAt DESC"
        cursor.execute(query, tuple(params))
        return cursor.fetchall()

    def fetch_coach(self, cursor, coach_id):
        cursor.execute(f"SELECT {COACH_COLUMNS} FROM coaches WHERE id = %s", (coach_id,))
        return cursor.fetchone()

    def coach_exists(self, cursor, coach_id):
        cursor.execute("SELECT id FROM coaches WHERE id = %s", (coach_id,))
        return cursor.fetchone() is not None

    def insert_coach(self, cursor, coach):
        cursor.execute(
            "INSERT INTO coaches (name, contact, email, specialization, managerId) VALUES (%s, %s, %s, %s, %s)",
            (coach['name'], coach['contact'], coach.get('email'), coach.get('specialization'), coach['managerId']),
        )
        return cursor.lastrowid

    def update_coach(self, cursor, coach_id, coach):
        cursor.execute(
            "UPDATE coaches SET name = %s, contact = %s, email = %s, specialization = %s WHERE id = %s",
            (coach['name'], coach['contact'], coach.get('email'), coach.get('specialization'), coach_id),
        )

    def delete_coach(self, cursor, coach_id):
        cursor.execute("DELETE FROM coaches WHERE id = %s", (coach_id,))
