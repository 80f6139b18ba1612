from datetime import date, time

from exposures.classify.classifier import classify, classify_payload
from exposures.classify.rules import build_rules
from exposures.common.models import Record, Vocabulary

TODAY = date(2021, 10, 19)
HOLT = ',Archived,"7-Eleven Holt","88 Hardwick Crescent","Holt","ACT","01/09/2021 - Wednesday",2:15pm,3:00pm,"Monitor"'
BELCONNEN = ',New,"ALDI Belconnen","Westfield Belconnen, Benjamin Way","Belconnen","ACT","04/10/2021 - Monday",7:00pm,7:30pm,"Casual"'
KALEEN = ',Updated,"Kaleen Plaza Pharmacy","Shop 5, Kaleen Shopping Centre, Georgina Crescent","Kaleen","ACT","09/10/2021 - Saturday",6:15pm,7:10pm,"Close"'


def test_classify_holt_example():
    record = classify(HOLT, today=TODAY)

    assert record.status == "Archived"
    assert record.exposure_location == "7-Eleven Holt"
    assert record.street == "88 Hardwick Crescent"
    assert record.suburb == "Holt"
    assert record.state == "ACT"
    assert record.date == date(2021, 9, 1)
    assert record.arrival_time == time(14, 15)
    assert record.departure_time == time(15, 0)
    assert record.contact == "Monitor"
    assert record.field_count == 10


def test_classify_split_street_keeps_first_fragment():
    record = classify(BELCONNEN, today=TODAY)

    assert record.exposure_location == "ALDI Belconnen"
    assert record.street == "Westfield Belconnen"
    assert record.suburb == "Belconnen"
    assert record.field_count == 11


def test_classify_twice_split_street():
    record = classify(KALEEN + "\r", today=TODAY)

    assert record.exposure_location == "Kaleen Plaza Pharmacy"
    assert record.street == "Shop 5"
    assert record.suburb == "Kaleen"
    assert record.contact == "Close"
    assert record.status == "Updated"
    assert record.field_count == 12


def test_short_line_yields_empty_record():
    record = classify('"Holt","ACT",2:15pm,3:00pm', today=TODAY)
    assert record == Record(field_count=4)
    assert record.date is None
    assert not record.is_retained


def test_classify_is_deterministic():
    assert classify(HOLT, today=TODAY) == classify(HOLT, today=TODAY)


def test_status_and_contact_land_regardless_of_order():
    line = ',"Monitor","7-Eleven Holt","88 Hardwick Crescent","Holt","ACT","01/09/2021 - Wednesday",2:15pm,3:00pm,Archived'
    record = classify(line, today=TODAY)
    assert record.status == "Archived"
    assert record.contact == "Monitor"


def test_lone_time_token_sets_neither_time():
    line = ',Archived,"7-Eleven Holt","88 Hardwick Crescent","Holt","ACT","01/09/2021 - Wednesday",2:15pm,,"Monitor"'
    record = classify(line, today=TODAY)
    assert record.arrival_time == time(0, 0)
    assert record.departure_time == time(0, 0)


def test_time_token_at_end_of_line_is_a_soft_miss():
    line = ',Archived,"7-Eleven Holt","88 Hardwick Crescent","Holt","ACT","01/09/2021 - Wednesday","Monitor",2:15pm'
    record = classify(line, today=TODAY)
    assert record.arrival_time == time(0, 0)
    assert record.departure_time == time(0, 0)
    assert record.suburb == "Holt"


def test_later_time_pair_overwrites_earlier_pair():
    line = ',Archived,"7-Eleven Holt","Holt","ACT",2:15pm,3:00pm,"01/09/2021",4:00pm,4:45pm,"Monitor"'
    record = classify(line, today=TODAY)
    assert record.arrival_time == time(16, 0)
    assert record.departure_time == time(16, 45)


def test_last_date_token_wins():
    line = ',Archived,"7-Eleven Holt","Holt","ACT","01/09/2021 - Wednesday",2:15pm,3:00pm,"Monitor","03/09/2021"'
    record = classify(line, today=TODAY)
    assert record.date == date(2021, 9, 3)


def test_first_status_token_wins():
    line = ',Archived,"7-Eleven Holt","Holt","ACT","01/09/2021",2:15pm,3:00pm,Updated,"Monitor"'
    record = classify(line, today=TODAY)
    assert record.status == "Archived"


def test_missing_date_falls_back_to_today():
    line = ',Archived,"7-Eleven Holt","Holt","ACT","sometime",2:15pm,3:00pm,"Monitor"'
    record = classify(line, today=TODAY)
    assert record.date == TODAY


def test_unparseable_date_keeps_default():
    line = ',Archived,"7-Eleven Holt","Holt","ACT","31/02/2021 - Wednesday",2:15pm,3:00pm,"Monitor"'
    record = classify(line, today=TODAY)
    assert record.date == TODAY


def test_public_transport_is_a_suburb():
    line = ',,"Bus Route 300","Public Transport","ACT","02/10/2021 - Saturday",8:05am,8:40am,"Monitor"'
    record = classify(line, today=TODAY)
    assert record.suburb == "Public Transport"
    assert record.exposure_location == "Bus Route 300"
    assert record.street == ""
    assert record.arrival_time == time(8, 5)


def test_unknown_enumerations_are_left_empty():
    line = ',Pending,"7-Eleven Holt","88 Hardwick Crescent","Holt","XYZ","01/09/2021",2:15pm,3:00pm,"Unknown"'
    record = classify(line, today=TODAY)
    assert record.status == ""
    assert record.state == ""
    assert record.contact == ""


def test_custom_vocabulary_rules():
    rules = build_rules(Vocabulary(statuses=("Active",), contacts=("Close",), states=("ACT",), suburb_literals=()))
    line = ',Active,"7-Eleven Holt","88 Hardwick Crescent","Holt","ACT","01/09/2021",2:15pm,3:00pm,"Close"'
    record = classify(line, rules=rules, today=TODAY)
    assert record.status == "Active"


def test_min_fields_threshold_is_configurable():
    line = '"Holt","ACT","01/09/2021",2:15pm,3:00pm'
    assert classify(line, min_fields=5, today=TODAY).suburb == "Holt"
    assert classify(line, today=TODAY).suburb == ""


def test_classify_payload_keeps_only_records_with_suburb():
    no_suburb = ',Archived,"7-Eleven holt","88 hardwick crescent","holt","ACT","01/09/2021",2:15pm,3:00pm,"Monitor"'
    payload = "\n".join([HOLT, "too,short", no_suburb, BELCONNEN, ""])

    records = classify_payload(payload, today=TODAY)

    assert [record.suburb for record in records] == ["Holt", "Belconnen"]
