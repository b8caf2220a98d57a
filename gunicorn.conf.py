# Gunicorn configuration file (gunicorn -c gunicorn.conf.py run:app)

# Binding
bind = "0.0.0.0:10000"

# Workers - Usar 1 porque los catálogos se guardan en memoria del proceso (SESSIONS dict).
# Con >1 worker, el catálogo subido en un worker no es visible en otro.
workers = 1
worker_class = "gthread"
threads = 4

# Timeouts - las hojas grandes tardan en parsearse
timeout = 120
graceful_timeout = 60
keepalive = 5

# Logging
accesslog = "-"
errorlog = "-"
loglevel = "info"
