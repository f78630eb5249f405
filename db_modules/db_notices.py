NOTICE_COLUMNS = (
    "id, title, description, documentUrl, documentFilename, scheduleImageUrl, scheduleImageFilename, "
    "noticeDate, createdAt, updatedAt"
)


class NoticeDbMixin:
    # ==================== Notices ====================

    def fetch_notices(self, cursor):
        cursor.execute(f"SELECT {NOTICE_COLUMNS} FROM notices ORDER BY noticeDate DESC, createdAt DESC")
        return cursor.fetchall()

    def fetch_notice(self, cursor, notice_id):
        cursor.execute(f"SELECT {NOTICE_COLUMNS} FROM notices WHERE id = %s", (notice_id,))
        return cursor.fetchone()

    def insert_notice(self, cursor, notice):
        cursor.execute(
            """
            INSERT INTO notices (
                title, description, documentUrl, documentFilename,
                scheduleImageUrl, scheduleImageFilename, noticeDate
            ) VALUES (%s, %s, %s, %s, %s, %s, %s)
            """,
            (
                notice['title'],
                notice['description'],
                notice.get('documentUrl'),
                notice.get('documentFilename'),
                notice.get('scheduleImageUrl'),
                notice.get('scheduleImageFilename'),
                notice['noticeDate'],
            ),
        )
        return cursor.lastrowid

    def update_notice(self, cursor, notice_id, notice):
        cursor.execute(
            """
            UPDATE notices
            SET title = %s, description = %s, documentUrl = %s, documentFilename = %s,
                scheduleImageUrl = %s, scheduleImageFilename = %s, noticeDate = %s
            WHERE id = %s
            """,
            (
                notice['title'],
                notice['description'],
                notice.get('documentUrl'),
                notice.get('documentFilename'),
                notice.get('scheduleImageUrl'),
                notice.get('scheduleImageFilename'),
                notice['noticeDate'],
                notice_id,
            ),
        )

    def delete_notice(self, cursor, notice_id):
        cursor.execute("DELETE FROM notices WHERE id = %s", (notice_id,))
