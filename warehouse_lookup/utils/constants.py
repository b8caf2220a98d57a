# Columnas aceptadas por campo, en orden de prioridad (perfil con zonas)
ZONED_ID_ALIASES = ('ID', 'id')
ZONED_ARTICLE_ALIASES = ('Артикул', 'article', 'Код')
ZONED_NAME_ALIASES = ('Название', 'name', 'Товар')
ZONED_CELL_ALIASES = ('Ячейка', 'cell')
ZONED_ZONE_ALIASES = ('Зона', 'zone')
ZONED_QUANTITY_ALIASES = ('Количество', 'quantity')

# Perfil extendido (conserva el resto de columnas)
EXTENDED_CODE_ALIASES = ('ID', 'id', 'Код', 'код')
EXTENDED_ARTICLE_ALIASES = ('Артикул', 'артикул', 'Article')
EXTENDED_NAME_ALIASES = ('Название', 'name', 'Товар', 'название', 'Name')
EXTENDED_CELL_ALIASES = ('Ячейка', 'cell', 'ячейка', 'Cell')

PROFILE_ZONED = 'zoned'
PROFILE_EXTENDED = 'extended'

DEFAULT_ZONE = 'A'
ZONE_LABELS = {
    'A': 'Электроника',
    'B': 'Периферия',
    'C': 'Аксессуары',
    'D': 'Сетевое оборудование',
}

ALLOWED_EXTENSIONS = ('.xlsx', '.xls')

# Textos de notificación
MSG_LOADED_TITLE = 'File loaded'
MSG_LOADED_BODY = 'Imported {count} products'
MSG_ERROR_TITLE = 'Load error'
MSG_ERROR_BODY = 'Check the spreadsheet format'

# Catálogo de ejemplo cuando no hay archivo por defecto
SAMPLE_ROWS = [
    {'ID': '1', 'Название': 'Смартфон Samsung Galaxy', 'Артикул': 'SM-001', 'Зона': 'A', 'Ячейка': 'A-12', 'Количество': 45},
    {'ID': '2', 'Название': 'Ноутбук Lenovo ThinkPad', 'Артикул': 'LP-003', 'Зона': 'A', 'Ячейка': 'A-08', 'Количество': 12},
    {'ID': '3', 'Название': 'Наушники Sony WH-1000', 'Артикул': 'SN-045', 'Зона': 'B', 'Ячейка': 'B-23', 'Количество': 78},
    {'ID': '4', 'Название': 'Клавиатура Logitech MX', 'Артикул': 'LG-012', 'Зона': 'B', 'Ячейка': 'B-15', 'Количество': 34},
    {'ID': '5', 'Название': 'Монитор Dell UltraSharp', 'Артикул': 'DL-089', 'Зона': 'C', 'Ячейка': 'C-05', 'Количество': 19},
    {'ID': '6', 'Название': 'Мышь Razer DeathAdder', 'Артикул': 'RZ-023', 'Зона': 'C', 'Ячейка': 'C-31', 'Количество': 56},
    {'ID': '7', 'Название': 'Планшет Apple iPad Pro', 'Артикул': 'AP-007', 'Зона': 'D', 'Ячейка': 'D-17', 'Количество': 23},
    {'ID': '8', 'Название': 'Роутер TP-Link Archer', 'Артикул': 'TP-056', 'Зона': 'D', 'Ячейка': 'D-09', 'Количество': 41},
]
