from fastapi import APIRouter, HTTPException
from app.core import config
from app.models.schemas import CheckRequest, CheckResponse, EvaluateRequest, EvaluateResponse
from app.services.boolexpr import ParseError, UnknownVariableError, solve
from app.services.checker import LicenseChecker, LicenseExpressionError
from app.services.report_service import generate_report
from app.services.spdx import to_boolexpr


router = APIRouter()


@router.post("/evaluate", response_model=EvaluateResponse)
def evaluate_expression(payload: EvaluateRequest):
    # 1) Traduci eventuale sintassi SPDX
    try:
        expression = to_boolexpr(payload.expression) if payload.syntax == "spdx" else payload.expression
        result = solve(expression, payload.context)
    except (ParseError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except UnknownVariableError as e:
        # 2) Licenza senza decisione: errore distinguibile dal client
        raise HTTPException(
            status_code=422,
            detail={"message": str(e), "unknown_variable": e.name},
        )

    return EvaluateResponse(expression=payload.expression, result=result)


@router.post("/check", response_model=CheckResponse)
def check_licenses(payload: CheckRequest):
    # 1) Costruisci il checker con le decisioni della richiesta
    try:
        checker = LicenseChecker.from_lists(
            payload.allowed,
            payload.disallowed,
            unknown_license_policy=config.UNKNOWN_LICENSE_POLICY,
            syntax=payload.syntax,
        )
    except ValueError as e:
        raise HTTPException(status_code=500, detail=f"Invalid configuration: {e}")

    # 2) Valuta le licenze di tutte le dipendenze
    try:
        report = checker.validate_current_licenses(payload.licenses)
    except LicenseExpressionError as e:
        raise HTTPException(status_code=400, detail=str(e))

    # 3) Report testuale opzionale su disco
    report_path = None
    if payload.write_report:
        report_path = generate_report(report, config.OUTPUT_BASE_DIR)

    return CheckResponse(
        passed=not report.has_disallowed_licenses() and not report.has_unknown_licenses(),
        report_path=report_path,
        **report.to_dict(),
    )
