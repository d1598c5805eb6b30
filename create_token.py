import sys
from app import create_app
from app.utils.auth import create_token

app = create_app()

subject = sys.argv[1] if len(sys.argv) > 1 else "dev"

with app.app_context():
    print(create_token(subject))
