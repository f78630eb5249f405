SPORT_COLUMNS = "id, name, description, createdAt, updatedAt"


class SportDbMixin:
    # ==================== Sports ====================

    def fetch_sports(self, cursor):
        cursor.execute(f"SELECT {SPORT_COLUMNS} FROM sports ORDER BY name ASC")
        return cursor.fetchall()

    def fetch_sport(self, cursor, sport_id):
        cursor.execute(f"SELECT {SPORT_COLUMNS} FROM sports WHERE id = %s", (sport_id,))
        return cursor.fetchone()

    def sport_name_taken(self, cursor, name, exclude_id=None):
        if exclude_id is None:
            cursor.execute("SELECT id FROM sports WHERE name = %s", (name,))
        else:
            cursor.execute("SELECT id FROM sports WHERE name = %s AND id != %s", (name, exclude_id))
        return cursor.fetchone() is not None

    def count_managers_using_sport(self, cursor, sport_id):
        """Managers reference a sport by name, not by id"""
        cursor.execute(
            "SELECT COUNT(*) AS count FROM managers WHERE sport = (SELECT name FROM sports WHERE id = %s)",
            (sport_id,),
        )
        row = cursor.fetchone() or {}
        return int(row.get('count') or 0)

    def insert_sport(self, cursor, name, description):
        cursor.execute("INSERT INTO sports (name, description) VALUES (%s, %s)", (name, description))
        return cursor.lastrowid

    def update_sport(self, cursor, sport_id, name, description):
        cursor.execute(
            "UPDATE sports SET name = %s, description = %s WHERE id = %s",
            (name, description, sport_id),
        )

    def delete_sport(self, cursor, sport_id):
        cursor.execute("DELETE FROM sports WHERE id = %s", (sport_id,))
