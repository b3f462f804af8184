from .launcher import start

start(prog_name="oscmsg")
