"""Staff movement tracker package.

Organized by feature modules (staff, movements, presence, reports) with a
thin Flask controller layer over service/repository layers. Data lives in a
remote spreadsheet web app reached over HTTP.
"""
