from flask import request, jsonify
from pymongo.errors import PyMongoError
from resume_intake.blueprints.api import api_bp
from resume_intake.extensions import get_services
from resume_intake.services.object_store import ObjectStoreUploadError
from resume_intake.services.resume_management import (
    ResumeError,
    ResumeInsight,
    ResumeNotFoundError,
)
import logging

logger = logging.getLogger(__name__)

__all__ = [
    "upload_resume",
    "list_resumes",
    "list_resume_insights",
    "get_resume_by_email",
    "get_resume",
    "get_resume_insight",
    "replace_resume_file",
]


def _uploaded_file():
    """The `resume_file` part of the request, or None when absent or unnamed."""
    file = request.files.get("resume_file")
    if file is None or file.filename == "":
        return None
    return file


@api_bp.route("/resumes", methods=["POST"])
def upload_resume():
    """Upload a new resume file and store its metadata"""
    file = _uploaded_file()
    if file is None:
        return jsonify({"error": "No file provided"}), 400

    user_id = request.form.get("user_id", "")
    email = request.form.get("email", "")
    if not user_id or not email:
        return jsonify({"error": "user_id and email are required"}), 400

    try:
        resume = get_services().pipeline.process_uploaded_file(file, user_id, email)
        return jsonify(resume.to_dict()), 201

    except ObjectStoreUploadError as e:
        return jsonify({"error": f"Failed to upload resume: {str(e)}"}), 502
    except (ResumeError, PyMongoError) as e:
        logger.error(f"Resume upload failed: {str(e)}")
        return jsonify({"error": f"Failed to store resume: {str(e)}"}), 500


@api_bp.route("/resumes", methods=["GET"])
def list_resumes():
    """Get all stored resumes"""
    try:
        resumes = get_services().repository.find_all()
        return jsonify({"resumes": [resume.to_dict() for resume in resumes]})

    except (ResumeError, PyMongoError) as e:
        logger.error(f"Listing resumes failed: {str(e)}")
        return jsonify({"error": f"Failed to fetch resumes: {str(e)}"}), 500


@api_bp.route("/resumes/insights", methods=["GET"])
def list_resume_insights():
    """Get the insight projection of every stored resume"""
    try:
        resumes = get_services().repository.find_all()
        return jsonify(
            {
                "insights": [
                    ResumeInsight.from_resume(resume).to_dict() for resume in resumes
                ]
            }
        )

    except (ResumeError, PyMongoError) as e:
        logger.error(f"Listing resume insights failed: {str(e)}")
        return jsonify({"error": f"Failed to fetch resume insights: {str(e)}"}), 500


@api_bp.route("/resumes/by-email", methods=["GET"])
def get_resume_by_email():
    """Look up a resume by the submitter's email"""
    email = request.args.get("email")
    if not email:
        return jsonify({"error": "Query parameter 'email' is required"}), 400

    try:
        resume = get_services().repository.find_by_email(email)
        return jsonify(resume.to_dict())

    except ResumeNotFoundError:
        return jsonify({"error": "Resume not found"}), 404
    except (ResumeError, PyMongoError) as e:
        logger.error(f"Lookup by email failed: {str(e)}")
        return jsonify({"error": f"Failed to fetch resume: {str(e)}"}), 500


@api_bp.route("/resumes/users/<user_id>", methods=["GET"])
def get_resume(user_id):
    """Look up a resume by user ID"""
    try:
        resume = get_services().repository.find_by_user_id(user_id)
        return jsonify(resume.to_dict())

    except ResumeNotFoundError:
        return jsonify({"error": "Resume not found"}), 404
    except (ResumeError, PyMongoError) as e:
        logger.error(f"Lookup for user_id={user_id} failed: {str(e)}")
        return jsonify({"error": f"Failed to fetch resume: {str(e)}"}), 500


@api_bp.route("/resumes/users/<user_id>/insight", methods=["GET"])
def get_resume_insight(user_id):
    """Get the insight projection of a user's resume"""
    try:
        resume = get_services().repository.find_by_user_id(user_id)
        return jsonify(ResumeInsight.from_resume(resume).to_dict())

    except ResumeNotFoundError:
        return jsonify({"error": "Resume not found"}), 404
    except (ResumeError, PyMongoError) as e:
        logger.error(f"Insight for user_id={user_id} failed: {str(e)}")
        return jsonify({"error": f"Failed to fetch resume insight: {str(e)}"}), 500


@api_bp.route("/resumes/users/<user_id>/file", methods=["PUT"])
def replace_resume_file(user_id):
    """Re-upload a user's resume file and refresh the stored URL"""
    file = _uploaded_file()
    if file is None:
        return jsonify({"error": "No file provided"}), 400

    try:
        resume = get_services().pipeline.replace_file(user_id, file)
        return jsonify(resume.to_dict())

    except ResumeNotFoundError:
        return jsonify({"error": "Resume not found"}), 404
    except ObjectStoreUploadError as e:
        return jsonify({"error": f"Failed to upload resume: {str(e)}"}), 502
    except (ResumeError, PyMongoError) as e:
        logger.error(f"Replacing file for user_id={user_id} failed: {str(e)}")
        return jsonify({"error": f"Failed to update resume: {str(e)}"}), 500
