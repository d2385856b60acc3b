from hilbmap.cli import app

app(prog_name="hilbmap")
