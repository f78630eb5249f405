#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
School Sports Management - table definitions and row helpers
"""

from datetime import date, datetime
from decimal import Decimal

# Columns stored as TINYINT(1) that the API exposes as booleans
BOOLEAN_COLUMNS = {'isSelected', 'isActive'}

# Internal bookkeeping columns never sent to clients
HIDDEN_COLUMNS = {'logoFilename', 'filename', 'documentFilename', 'scheduleImageFilename'}


def serialize_row(row):
    """Convert a dictionary cursor row into JSON-friendly values"""
    if row is None:
        return None

    result = {}
    for key, value in row.items():
        if key in HIDDEN_COLUMNS:
            continue
        if isinstance(value, (datetime, date)):
            value = value.isoformat()
        elif isinstance(value, Decimal):
            value = int(value) if value == value.to_integral_value() else float(value)
        elif key in BOOLEAN_COLUMNS and value is not None:
            value = bool(value)
        result[key] = value
    return result


def serialize_rows(rows):
    return [serialize_row(row) for row in rows or []]


# Creation order matters: referenced tables come first
DATABASE_SCHEMA = {
    'teams': '''
        CREATE TABLE IF NOT EXISTS teams (
            id INT AUTO_INCREMENT PRIMARY KEY,
            name VARCHAR(255) NOT NULL UNIQUE,
            department VARCHAR(255) NOT NULL,
            logoUrl VARCHAR(500) DEFAULT NULL,
            logoFilename VARCHAR(255) DEFAULT NULL,
            color VARCHAR(50) DEFAULT NULL,
            createdAt TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updatedAt TIMESTAMP DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP,
            INDEX idx_name (name)
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COLLATE=utf8mb4_unicode_ci;
    ''',

    'sports': '''
        CREATE TABLE IF NOT EXISTS sports (
            id INT AUTO_INCREMENT PRIMARY KEY,
            name VARCHAR(255) NOT NULL UNIQUE,
            description TEXT,
            createdAt TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updatedAt TIMESTAMP DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP,
            INDEX idx_name (name)
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COLLATE=utf8mb4_unicode_ci;
    ''',

    'managers': '''
        CREATE TABLE IF NOT EXISTS managers (
            id INT AUTO_INCREMENT PRIMARY KEY,
            name VARCHAR(255) NOT NULL,
            department VARCHAR(255) NOT NULL,
            sport VARCHAR(255) NOT NULL,
            contact VARCHAR(255) NOT NULL,
            email VARCHAR(255) NOT NULL UNIQUE,
            studentCount INT NOT NULL,
            teamId INT DEFAULT NULL,
            createdAt TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updatedAt TIMESTAMP DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP,
            INDEX idx_email (email),
            INDEX idx_sport (sport),
            INDEX idx_team (teamId),
            CONSTRAINT fk_managers_team FOREIGN KEY (teamId) REFERENCES teams(id) ON DELETE SET NULL
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COLLATE=utf8mb4_unicode_ci;
    ''',

    'students': '''
        CREATE TABLE IF NOT EXISTS students (
            id INT AUTO_INCREMENT PRIMARY KEY,
            name VARCHAR(255) NOT NULL,
            prn_uid VARCHAR(255) NOT NULL UNIQUE,
            contact VARCHAR(255) NOT NULL,
            email VARCHAR(255),
            address TEXT,
            birthDate DATE NOT NULL,
            age INT,
            managerId INT,
            linkToken VARCHAR(64) DEFAULT NULL,
            createdAt TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updatedAt TIMESTAMP DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP,
            INDEX idx_prn_uid (prn_uid),
            INDEX idx_manager (managerId),
            INDEX idx_link_token (linkToken),
            CONSTRAINT fk_students_manager FOREIGN KEY (managerId) REFERENCES managers(id) ON DELETE CASCADE
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COLLATE=utf8mb4_unicode_ci;
    ''',

    'coaches': '''
        CREATE TABLE IF NOT EXISTS coaches (
            id INT AUTO_INCREMENT PRIMARY KEY,
            name VARCHAR(255) NOT NULL,
            contact VARCHAR(255) NOT NULL,
            email VARCHAR(255),
            specialization VARCHAR(255),
            managerId INT,
            createdAt TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updatedAt TIMESTAMP DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP,
            INDEX idx_manager (managerId),
            CONSTRAINT fk_coaches_manager FOREIGN KEY (managerId) REFERENCES managers(id) ON DELETE CASCADE
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COLLATE=utf8mb4_unicode_ci;
    ''',

    'student_selections': '''
        CREATE TABLE IF NOT EXISTS student_selections (
            id INT AUTO_INCREMENT PRIMARY KEY,
            studentId INT NOT NULL,
            managerId INT NOT NULL,
            isSelected BOOLEAN DEFAULT FALSE,
            createdAt TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updatedAt TIMESTAMP DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP,
            UNIQUE KEY unique_student_manager (studentId, managerId),
            INDEX idx_student (studentId),
            INDEX idx_manager (managerId),
            CONSTRAINT fk_selections_student FOREIGN KEY (studentId) REFERENCES students(id) ON DELETE CASCADE,
            CONSTRAINT fk_selections_manager FOREIGN KEY (managerId) REFERENCES managers(id) ON DELETE CASCADE
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COLLATE=utf8mb4_unicode_ci;
    ''',

    'student_links': '''
        CREATE TABLE IF NOT EXISTS student_links (
            id INT AUTO_INCREMENT PRIMARY KEY,
            managerId INT NOT NULL,
            token VARCHAR(64) NOT NULL UNIQUE,
            isActive BOOLEAN DEFAULT TRUE,
            createdAt TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updatedAt TIMESTAMP DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP,
            INDEX idx_manager (managerId),
            INDEX idx_token (token),
            CONSTRAINT fk_links_manager FOREIGN KEY (managerId) REFERENCES managers(id) ON DELETE CASCADE
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COLLATE=utf8mb4_unicode_ci;
    ''',

    'event_images': '''
        CREATE TABLE IF NOT EXISTS event_images (
            id INT AUTO_INCREMENT PRIMARY KEY,
            title VARCHAR(255) DEFAULT NULL,
            description TEXT,
            imageUrl VARCHAR(500) NOT NULL,
            filename VARCHAR(255) DEFAULT NULL,
            displayOrder INT NOT NULL DEFAULT 0,
            createdAt TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updatedAt TIMESTAMP DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP,
            INDEX idx_display_order (displayOrder)
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COLLATE=utf8mb4_unicode_ci;
    ''',

    'notices': '''
        CREATE TABLE IF NOT EXISTS notices (
            id INT AUTO_INCREMENT PRIMARY KEY,
            title VARCHAR(255) NOT NULL,
            description TEXT NOT NULL,
            documentUrl VARCHAR(500) DEFAULT NULL,
            documentFilename VARCHAR(255) DEFAULT NULL,
            scheduleImageUrl VARCHAR(500) DEFAULT NULL,
            scheduleImageFilename VARCHAR(255) DEFAULT NULL,
            noticeDate DATE NOT NULL,
            createdAt TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updatedAt TIMESTAMP DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP,
            INDEX idx_notice_date (noticeDate)
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COLLATE=utf8mb4_unicode_ci;
    ''',
}
