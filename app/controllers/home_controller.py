from datetime import datetime
from flask import jsonify
from app.extensions import db

def home_index():
    return jsonify({
        "message": "Blog article API",
    })

def health_check():
    db_status = "healthy"
    try:
        # Ping the database
        db.session.execute(db.text('SELECT 1'))
    except Exception as e:
        db.session.rollback()
        db_status = f"unhealthy: {str(e)}"

    return jsonify({
        "status": "online",
        "database": db_status,
        "server_time": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
    })
