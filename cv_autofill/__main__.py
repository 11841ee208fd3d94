from cv_autofill.cli import app

app()
