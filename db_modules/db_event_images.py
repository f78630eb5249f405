EVENT_IMAGE_COLUMNS = "id, title, description, imageUrl, filename, displayOrder, createdAt, updatedAt"


class EventImageDbMixin:
    # ==================== Event images ====================

    def fetch_event_images(self, cursor):
        cursor.execute(
            f"SELECT {EVENT_IMAGE_COLUMNS} FROM event_images ORDER BY displayOrder ASC, createdAt DESC"
        )
        return cursor.fetchall()

    def fetch_event_image(self, cursor, image_id):
        cursor.execute(f"SELECT {EVENT_IMAGE_COLUMNS} FROM event_images WHERE id = %s", (image_id,))
        return cursor.fetchone()

    def insert_event_image(self, cursor, image):
        cursor.execute(
            """
            INSERT INTO event_images (title, description, imageUrl, filename, displayOrder)
            VALUES (%s, %s, %s, %s, %s)
            """,
            (image.get('title'), image.get('description'), image['imageUrl'], image.get('filename'),
             image.get('displayOrder', 0)),
        )
        return cursor.lastrowid

    def update_event_image(self, cursor, image_id, image):
        cursor.execute(
            """
            UPDATE event_images
            SET title = %s, description = %s, imageUrl = %s, filename = %s, displayOrder = %s
            WHERE id = %s
            """,
            (image.get('title'), image.get('description'), image['imageUrl'], image.get('filename'),
             image.get('displayOrder', 0), image_id),
        )

    def delete_event_image(self, cursor, image_id):
        cursor.execute("DELETE FROM event_images WHERE id = %s", (image_id,))
