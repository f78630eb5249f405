import logging


logger = logging.getLogger(__name__)

TEAM_COLUMNS = "id, name, department, logoUrl, logoFilename, color, createdAt, updatedAt"


class TeamDbMixin:
    """Team queries.

    logoFilename is kept next to logoUrl so the file can be removed from the
    upload folder when the logo is replaced or the team deleted.
    """

    # ==================== Teams ====================

    def fetch_teams(self, cursor):
        cursor.execute(f"SELECT {TEAM_COLUMNS} FROM teams ORDER BY name ASC")
        return cursor.fetchall()

    def fetch_team(self, cursor, team_id):
        cursor.execute(f"SELECT {TEAM_COLUMNS} FROM teams WHERE id = %s", (team_id,))
        return cursor.fetchone()

    def team_exists(self, cursor, team_id):
        cursor.execute("SELECT id FROM teams WHERE id = %s", (team_id,))
        return cursor.fetchone() is not None

    def team_name_taken(self, cursor, name, exclude_id=None):
        if exclude_id is None:
            cursor.execute("SELECT id FROM teams WHERE name = %s", (name,))
        else:
            cursor.execute("SELECT id FROM teams WHERE name = %s AND id != %s", (name, exclude_id))
        return cursor.fetchone() is not None

    def insert_team(self, cursor, team):
        cursor.execute(
            """
            INSERT INTO teams (name, department, logoUrl, logoFilename, color)
            VALUES (%s, %s, %s, %s, %s)
            """,
            (team['name'], team['department'], team.get('logoUrl'), team.get('logoFilename'), team.get('color')),
        )
        return cursor.lastrowid

    def update_team(self, cursor, team_id, team):
        cursor.execute(
            """
            UPDATE teams
            SET name = %s, department = %s, logoUrl = %s, logoFilename = %s, color = %s
            WHERE id = %s
            """,
            (
                team['name'],
                team['department'],
                team.get('logoUrl'),
                team.get('logoFilename'),
                team.get('color'),
                team_id,
            ),
        )

    def delete_team(self, cursor, team_id):
        # managers.teamId is cleared by ON DELETE SET NULL
        cursor.execute("DELETE FROM teams WHERE id = %s", (team_id,))
        logger.info("Deleted team %s", team_id)
