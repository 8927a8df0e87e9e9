from site_archiver.cli import app

app(prog_name="site-archiver")
