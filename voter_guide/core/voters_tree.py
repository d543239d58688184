# Voting eligibility questionnaire.
# Keys are node ids; "initial" lists the top-level branches.
# Key "1010" holds a node whose id reads "1000" (outcome 7). Kept as shipped.

VOTERS_DECISION_TREE = {
    "initial": {
        "id": "initial",
        "options": ["0", "1"]
    },
    "0": {
        "id": "0",
        "label": "Ești cetățean român",
        "options": ["00", "01"]
    },
    "1": {
        "id": "1",
        "label": "Ești cetățean al unei alte țări din Uniunea Europeană",
        "options": ["10", "11"]
    },
    "00": {
        "id": "00",
        "label": "Nu te vei afla în România pe 27 septembrie",
        "options": ["000"]
    },
    "01": {
        "id": "01",
        "label": "Te vei afla în Romania pe 27 septembrie",
        "options": ["010", "011"]
    },
    "000": {
        "id": "000",
        "outcome_id": 1
    },
    "010": {
        "id": "010",
        "label": "Locuiești la adresa din buletin",
        "options": ["0100"]
    },
    "0100": {
        "id": "0100",
        "outcome_id": 2
    },
    "011": {
        "id": "011",
        "label": "Locuiești la altă adresă decât cea din buletin",
        "options": ["0110", "0111"]
    },
    "0110": {
        "id": "0110",
        "label": "Ai pe spatele buletinului un autocolant cu viza de flotant",
        "options": ["01100"]
    },
    "01100": {
        "id": "01100",
        "outcome_id": 3
    },
    "0111": {
        "id": "0111",
        "label": "Nu ai viză de flotant pe spatele buletinului",
        "options": ["01110", "01111"]
    },
    "01110": {
        "id": "01110",
        "label": "Te poate lua cineva în spațiu",
        "options": ["011100"]
    },
    "011100": {
        "id": "011100",
        "outcome_id": 4
    },
    "01111": {
        "id": "01111",
        "label": "Nu ai pe cineva care te poate lua în spațiu",
        "options": ["011110"]
    },
    "011110": {
        "id": "011110",
        "outcome_id": 5
    },
    "10": {
        "id": "10",
        "label": "Ești în evidența Inspectoratului General pentru Imigrări",
        "options": ["100", "101"]
    },
    "100": {
        "id": "100",
        "label": "Adresa la care locuiești nu se va schimba în intervalul 3-27 septembrie",
        "options": ["1010"]
    },
    "1000": {
        "id": "1000",
        "outcome_id": 6
    },
    "101": {
        "id": "101",
        "label": "Adresa la care locuiești nu se va schimba în intervalul 3-27 septembrie",
        "options": ["1010"]
    },
    "1010": {
        "id": "1000",
        "outcome_id": 7
    },
    "11": {
        "id": "11",
        "label": "Nu ești în evidența Inspectoratului General pentru Imigrări",
        "options": ["110"]
    },
    "110": {
        "id": "110",
        "outcome_id": 8
    },
}
