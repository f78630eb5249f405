STUDENT_COLUMNS = (
    "id, name, prn_uid, contact, email, address, birthDate, age, managerId, linkToken, createdAt, updatedAt"
)


class StudentDbMixin:
    # ==================== Students ====================

    def fetch_students(self, cursor, manager_id=None):
        query = f"SELECT {STUDENT_COLUMNS} FROM students"
        params = []

        if manager_id:
            query += " WHERE managerId = %s"
            params.append(manager_id)

        query += " ORDER BY createdAt DESC"
        cursor.execute(query, tuple(params))
        return cursor.fetchall()

    def fetch_student(self, cursor, student_id):
        cursor.execute(f"SELECT {STUDENT_COLUMNS} FROM students WHERE id = %s", (student_id,))
        return cursor.fetchone()

    def student_exists(self, cursor, student_id):
        cursor.execute("SELECT id FROM students WHERE id = %s", (student_id,))
        return cursor.fetchone() is not None

    def prn_uid_taken(self, cursor, prn_uid, exclude_id=None):
        if exclude_id is None:
            cursor.execute("SELECT id FROM students WHERE prn_uid = %s", (prn_uid,))
        else:
            cursor.execute("SELECT id FROM students WHERE prn_uid = %s AND id != %s", (prn_uid, exclude_id))
        return cursor.fetchone() is not None

    def insert_student(self, cursor, student):
        cursor.execute(
            """
            INSERT INTO students (name, prn_uid, contact, email, address, birthDate, age, managerId, linkToken)
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
            """,
            (
                student['name'],
                student['prn_uid'],
                student['contact'],
                student.get('email'),
                student.get('address'),
                student['birthDate'],
                student['age'],
                student['managerId'],
                student.get('linkToken'),
            ),
        )
        return cursor.lastrowid

    def update_student(self, cursor, student_id, student):
        cursor.execute(
            """
            UPDATE students
            SET name = %s, prn_uid = %s, contact = %s, email = %s, address = %s, birthDate = %s, age = %s
            WHERE id = %s
            """,
            (
                student['name'],
                student['prn_uid'],
                student['contact'],
                student.get('email'),
                student.get('address'),
                student['birthDate'],
                student['age'],
                student_id,
            ),
        )

    def delete_student(self, cursor, student_id):
        cursor.execute("DELETE FROM students WHERE id = %s", (student_id,))

    def fetch_students_with_selections(self, cursor, manager_id):
        """A manager's students, each flagged with that manager's selection"""
        cursor.execute(
            """
            SELECT s.id, s.name, s.prn_uid, s.contact, s.email, s.address, s.birthDate, s.age,
                   s.managerId, s.linkToken, s.createdAt, s.updatedAt,
                   COALESCE(ss.isSelected, FALSE) AS isSelected,
                   ss.id AS selectionId
            FROM students s
            LEFT JOIN student_selections ss ON s.id = ss.studentId AND ss.managerId = %s
            WHERE s.managerId = %s
            ORDER BY s.name ASC
            """,
            (manager_id, manager_id),
        )
        return cursor.fetchall()
