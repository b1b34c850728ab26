"""
Flask application for the nominations service.
Lists, collects and reviews nominations, and validates a nomination against
institutional records.
"""

from dotenv import load_dotenv

# Load environment variables from .env file before config is read
load_dotenv()

import logging
from typing import Optional

from flask import Flask, request, jsonify
from pydantic import ValidationError

from auth.session import authenticate, current_auth
from nominations import config, database
from nominations.records import RecordLookupError
from nominations.runner import OfficeNotFoundError, check_nomination
from nominations.schema import Nomination, NominationCandidateInfo

app = Flask(__name__)
app.logger.setLevel(logging.INFO)
app.before_request(authenticate)

# Nominations arrive one paper sheet at a time.
MAX_NOMINATIONS_PER_SHEET = 25

database.init_database()


def error(message: str, status: int):
    return jsonify({"error": message}), status


def parse_int(value: Optional[str]) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def can_manage(candidate_rcs: str) -> bool:
    """Admins, the candidate, and the candidate's assistants may manage nominations."""
    auth = current_auth()
    if auth.admin or (auth.cas_user and auth.cas_user == candidate_rcs):
        return True
    return bool(auth.cas_user) and auth.cas_user in database.candidate_assistants(candidate_rcs)


@app.route("/", methods=["GET"])
def list_nominations():
    """Nominations collected by a candidate, optionally for one office."""
    rcs = (request.values.get("rcs") or "").lower()
    if not rcs:
        app.logger.info("missing rcs")
        return error("missing rcs", 422)

    office = request.values.get("office")
    office_id = None
    if office:
        office_id = parse_int(office)
        if office_id is None:
            return error("invalid office", 422)

    try:
        if not can_manage(rcs):
            return error("Unauthorized", 401)
        nominations = database.list_nominations(rcs, office_id=office_id)
    except database.DataAccessError as e:
        app.logger.error(f"unable to list nominations: {e}")
        return error("Internal Server Error", 500)

    return jsonify([n.model_dump() for n in nominations])


@app.route("/", methods=["POST"])
def add_nominations():
    """Record one sheet of nominations for a candidate and office."""
    rcs = (request.values.get("rcs") or "").lower()
    if not rcs:
        app.logger.info("missing rcs")
        return error("missing rcs", 422)

    try:
        if not can_manage(rcs):
            return error("Unauthorized", 401)
    except database.DataAccessError as e:
        app.logger.error(f"unable to get candidate assistants: {e}")
        return error("Internal Server Error", 500)

    office_id = parse_int(request.values.get("office"))
    if office_id is None:
        app.logger.info("missing office")
        return error("missing office", 422)

    payload = request.get_json(silent=True)
    if not isinstance(payload, list):
        return error("expected a JSON list of nominations", 400)
    try:
        nominations = [Nomination.model_validate(item) for item in payload]
    except ValidationError as e:
        app.logger.info(f"unable to decode nominations: {e}")
        return error("Bad Request", 400)

    if len(nominations) > MAX_NOMINATIONS_PER_SHEET:
        return error(f"too many nominations; only {MAX_NOMINATIONS_PER_SHEET} per page", 422)

    try:
        page = database.add_nominations(rcs, office_id, nominations)
    except database.DataAccessError as e:
        app.logger.error(f"unable to add nominations: {e}")
        return error("Internal Server Error", 500)

    return jsonify({"success": True, "page": page, "count": len(nominations)}), 201


@app.route("/", methods=["PUT"])
def modify_nomination():
    """Update a nomination, mainly to mark it valid, invalid or pending. Admins only."""
    if not current_auth().admin:
        return error("Unauthorized", 401)

    nomination_id = parse_int(request.values.get("nomination"))
    if nomination_id is None:
        app.logger.info("missing nomination ID")
        return error("missing nomination ID", 422)

    try:
        nomination = Nomination.model_validate(request.get_json(silent=True) or {})
    except ValidationError as e:
        app.logger.info(f"unable to decode nomination: {e}")
        return error("Bad Request", 400)
    nomination = nomination.model_copy(update={"id": nomination_id})

    try:
        updated = database.update_nomination(nomination)
    except database.DataAccessError as e:
        app.logger.error(f"unable to update nomination: {e}")
        return error("Internal Server Error", 500)

    if not updated:
        return error("Nomination not found", 404)
    return jsonify({"success": True})


@app.route("/validate", methods=["GET"])
def validate_nomination():
    """Check a nomination against institutional records. Admins only."""
    if not current_auth().admin:
        return error("Unauthorized", 401)

    office = request.values.get("office")
    if not office:
        return error("missing office", 422)
    candidate_rcs = request.values.get("candidate_rcs")
    if not candidate_rcs:
        return error("missing candidate RCS", 422)

    office_id = parse_int(office)
    rin = parse_int(request.values.get("rin"))
    nomination_id = parse_int(request.values.get("id"))
    if office_id is None or rin is None or nomination_id is None:
        app.logger.info("unable to parse office, rin or id")
        return error("Unprocessable Entity", 422)

    candidate = NominationCandidateInfo(
        institutional_numeric_id=rin,
        initials=request.values.get("initials", ""),
        partial_institutional_id=request.values.get("partial_rin", ""),
        name=request.values.get("name", ""),
        nomination_record_id=nomination_id,
        candidate_identifier=candidate_rcs.lower(),
    )

    try:
        result = check_nomination(candidate, office_id, config.current_year())
    except OfficeNotFoundError:
        return error("Not Found", 404)
    except database.DataAccessError as e:
        app.logger.error(f"unable to query database: {e}")
        return error("Internal Server Error", 500)
    except RecordLookupError as e:
        app.logger.error(f"unable to get CMS info: {e}")
        return error("unable to get CMS info", 500)

    return jsonify(result.to_dict())


@app.route("/counts", methods=["GET"])
def nomination_counts():
    """Valid nominations per candidate and office."""
    rcs = request.values.get("rcs") or None
    try:
        counts = database.nomination_counts(rcs)
    except database.DataAccessError as e:
        app.logger.error(f"unable to query database: {e}")
        return error("Internal Server Error", 500)
    return jsonify([c.model_dump() for c in counts])


if __name__ == "__main__":
    host, _, port = config.LISTEN_URL.rpartition(":")
    app.logger.info(f"elecnoms listening on {config.LISTEN_URL}...")
    app.run(host=host or "0.0.0.0", port=int(port), debug=False)
