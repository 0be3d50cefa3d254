# Bind & workers
bind = "0.0.0.0:8080"
# One process: the document store lock is per process, so extra workers
# would interleave whole-file rewrites. Scale with threads instead.
workers = 1
threads = 4
timeout = 60
graceful_timeout = 30
keepalive = 5

# Logs to stdout/stderr (collected by Docker)
accesslog = "-"
errorlog = "-"
loglevel = "info"

wsgi_app = "chirpy:create_app()"

# Trust proxy headers
forwarded_allow_ips = "*"
proxy_protocol = False
