#!/usr/bin/env python3
"""
Local entry point: `flask --app app run` or `python app.py` starts the
resume intake API with the debugger on.
"""

from resume_intake.app import create_app


app = create_app()


if __name__ == "__main__":
    app.run(debug=True, host="127.0.0.1", port=5000)
