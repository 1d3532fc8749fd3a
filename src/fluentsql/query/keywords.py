"""SQL keyword and operator tokens used when rendering statements."""

# ── Statement keywords ─────────────────────────────────────────────
SELECT = 'SELECT'
DISTINCT = 'DISTINCT'
FROM = 'FROM'
INSERT_INTO = 'INSERT INTO'
VALUES = 'VALUES'
DEFAULT_VALUES = 'DEFAULT VALUES'
UPDATE = 'UPDATE'
SET = 'SET'
DELETE_FROM = 'DELETE FROM'

# ── Clause keywords ────────────────────────────────────────────────
WHERE = 'WHERE'
GROUP_BY = 'GROUP BY'
ORDER_BY = 'ORDER BY'
DESC = 'DESC'
LIMIT = 'LIMIT'
OFFSET = 'OFFSET'

# ── Connectives ────────────────────────────────────────────────────
AND = 'AND'
OR = 'OR'
IN = 'IN'

# ── Comparison operators ───────────────────────────────────────────
EQUAL = '='
GREATER_EQUAL = '>='
SMALLER_EQUAL = '<='
DIFFERENT = '<>'

NULL = 'NULL'
ALL_COLUMNS = '*'

# Separator between assignments, selected columns and inserted values
LIST_SEPARATOR = ', '
