from tsundoku.cli import app

app()
