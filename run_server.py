import os
from legal_insight.api.server import app

if __name__ == "__main__":
    # Check for production mode
    if os.environ.get("APP_ENV") == "production":
        from waitress import serve
        print("Starting production server with Waitress on port 5002...")
        serve(app, host="0.0.0.0", port=int(os.environ.get("PORT", "5002")))
    else:
        print("Starting development server...")
        app.run(debug=True, port=5002, host="0.0.0.0")
