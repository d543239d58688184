from fastapi import APIRouter, Request, HTTPException, Form

router = APIRouter()

SESSION_KEY = "questionnaire_session_id"


def get_service(request: Request):
    return request.app.state.questionnaire_service


def get_session_id(request: Request) -> str:
    session_id = request.session.get(SESSION_KEY)
    if not session_id:
        raise HTTPException(400, "No active session")
    return session_id


def run(action, *args):
    try:
        return action(*args)
    except ValueError as e:
        raise HTTPException(404, str(e))


@router.get("/session")
async def get_session(request: Request):
    service = get_service(request)
    session_id = request.session.get(SESSION_KEY)
    if not session_id or not service.get_session(session_id):
        return {"session": None}
    return {"session": service.get_view(session_id)}


@router.post("/start")
async def start_session(request: Request):
    service = get_service(request)

    # Starting again replaces any navigator this visitor already had
    previous = request.session.get(SESSION_KEY)
    if previous:
        service.end_session(previous)

    session_id = await service.create_session()
    request.session[SESSION_KEY] = session_id
    return {"success": True, "session_id": session_id, "view": service.get_view(session_id)}


@router.post("/select")
async def select_option(request: Request, option_id: str = Form(...)):
    service = get_service(request)
    view = run(service.select_option, get_session_id(request), option_id)
    return {"success": True, "view": view}


@router.post("/back")
async def go_back(request: Request):
    service = get_service(request)
    view = run(service.back, get_session_id(request))
    return {"success": True, "view": view}


@router.post("/start-over")
async def start_over(request: Request):
    service = get_service(request)
    view = run(service.start_over, get_session_id(request))
    return {"success": True, "view": view}


@router.delete("/session")
async def end_session(request: Request):
    service = get_service(request)
    session_id = get_session_id(request)
    request.session.pop(SESSION_KEY, None)
    if not service.end_session(session_id):
        raise HTTPException(404, "Session not found")
    return {"success": True}
