# run.py
#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import os

from dotenv import load_dotenv
load_dotenv()

from reprova import create_app

app = create_app()

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8080))
    debug = os.environ.get("FLASK_DEBUG","false").lower()=="true"
    app.run(host="0.0.0.0", port=port, debug=debug, use_reloader=debug, threaded=True)
