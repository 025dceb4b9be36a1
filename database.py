"""
SQLite база данных для рекорда и истории партий.

Хранилище необязательное: если файл недоступен, игра продолжается,
рекорд считается нулевым, а ошибки только пишутся в лог.
"""
import logging
import sqlite3

from config import DB_PATH, HIGH_SCORE_KEY

logger = logging.getLogger(__name__)


class SnakeDatabase:
    def __init__(self, db_path=DB_PATH, key=HIGH_SCORE_KEY):
        self.db_path = db_path
        self.key = key
        self.conn = None
        self._init_db()

    def _init_db(self):
        """Инициализация базы данных"""
        try:
            self.conn = sqlite3.connect(self.db_path)
            cursor = self.conn.cursor()

            # Ключ-значение (рекорд)
            cursor.execute('''
                CREATE TABLE IF NOT EXISTS settings (
                    key TEXT PRIMARY KEY,
                    value TEXT
                )
            ''')

            # Сыгранные партии
            cursor.execute('''
                CREATE TABLE IF NOT EXISTS games (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    score INTEGER,
                    length INTEGER,
                    speed TEXT,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            ''')

            self.conn.commit()
        except sqlite3.Error as e:
            logger.warning("High score storage unavailable (%s): %s", self.db_path, e)
            self.close()

    @property
    def available(self):
        return self.conn is not None

    def load_high_score(self):
        """Рекорд из базы, 0 если его нет или база недоступна"""
        if self.conn is None:
            return 0
        try:
            cursor = self.conn.cursor()
            cursor.execute('SELECT value FROM settings WHERE key = ?', (self.key,))
            row = cursor.fetchone()
        except sqlite3.Error as e:
            logger.warning("Failed to read high score: %s", e)
            return 0

        if row is None:
            return 0
        try:
            return max(0, int(row[0]))
        except (TypeError, ValueError):
            logger.warning("Malformed high score value %r, using 0", row[0])
            return 0

    def save_high_score_if_higher(self, score):
        """Записать рекорд, только если он побит. True - если записали."""
        if self.conn is None:
            return False
        if score <= self.load_high_score():
            return False
        try:
            cursor = self.conn.cursor()
            cursor.execute('''
                INSERT INTO settings (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
            ''', (self.key, str(int(score))))
            self.conn.commit()
        except sqlite3.Error as e:
            logger.warning("Failed to save high score %d: %s", score, e)
            return False
        logger.info("New high score saved: %d", score)
        return True

    def record_game(self, score, length, speed):
        """Сохранить итог партии"""
        if self.conn is None:
            return False
        try:
            cursor = self.conn.cursor()
            cursor.execute('''
                INSERT INTO games (score, length, speed)
                VALUES (?, ?, ?)
            ''', (score, length, speed))
            self.conn.commit()
        except sqlite3.Error as e:
            logger.warning("Failed to record game: %s", e)
            return False
        return True

    def get_stats(self):
        """Сколько партий сыграно, лучший и средний счёт"""
        stats = {'games': 0, 'best': 0, 'avg': 0.0}
        if self.conn is None:
            return stats
        try:
            cursor = self.conn.cursor()
            cursor.execute('SELECT COUNT(*), MAX(score), AVG(score) FROM games')
            count, best, avg = cursor.fetchone()
        except sqlite3.Error as e:
            logger.warning("Failed to read game stats: %s", e)
            return stats

        stats['games'] = count or 0
        stats['best'] = best or 0
        stats['avg'] = float(avg or 0.0)
        return stats

    def close(self):
        """Закрыть соединение"""
        if self.conn:
            self.conn.close()
        self.conn = None
