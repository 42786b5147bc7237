from conventional_release.cli import app

app(prog_name="conventional-release")
